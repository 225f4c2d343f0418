"""Ingress resolution.

Joins Ingress backends against a target Service, either named directly or
reached through a Deployment whose labels satisfy a Service's selector.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from loguru import logger

from lookupingress.core.models import DeploymentInfo, IngressInfo, MatchResult, QueryKind

if TYPE_CHECKING:
    from lookupingress.infra.k8s.controller import KubernetesControllerSync


def selector_matches(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    """Check whether a Service selector selects a set of labels.

    Every key of ``selector`` must be present in ``labels`` with an equal
    value. An empty selector selects nothing.
    """
    if not selector:
        return False
    return all(key in labels and labels[key] == value for key, value in selector.items())


def find_backend_matches(
    ingresses: Iterable[IngressInfo], service_name: str
) -> list[MatchResult]:
    """Collect every Ingress path whose Service backend is ``service_name``.

    Results follow Ingress, rule, then path order. Paths without a Service
    backend are skipped.
    """
    results: list[MatchResult] = []
    for ingress in ingresses:
        for rule in ingress.rules:
            for path in rule.paths:
                if path.service_name is None:
                    continue
                if path.service_name == service_name:
                    results.append(
                        MatchResult(
                            ingress_name=ingress.name,
                            host=rule.host,
                            path=path.path,
                            service_name=path.service_name,
                        )
                    )
    return results


class IngressResolver:
    """Resolves which Ingresses route traffic to a Service or Deployment.

    Cluster objects are fetched through the controller once per call to
    `resolve()`; nothing is cached between calls.
    """

    def __init__(self, controller: KubernetesControllerSync) -> None:
        self._controller = controller

    def resolve(self, kind: str, name: str, namespace: str = "default") -> list[MatchResult]:
        """Find the Ingress paths that route to ``name``.

        Args:
            kind: "service" or "deployment", case-insensitive. Any other
                value yields no results.
            name: Name of the Service or Deployment
            namespace: Namespace to search

        Returns:
            Matches in discovery order, duplicates preserved

        Raises:
            ClusterQueryError: If Ingresses or Services cannot be listed
        """
        ingresses = self._controller.get_ingresses(namespace)

        query_kind = QueryKind.parse(kind)
        if query_kind is QueryKind.SERVICE:
            return find_backend_matches(ingresses, name)
        if query_kind is QueryKind.DEPLOYMENT:
            return self._resolve_deployment(ingresses, name, namespace)

        logger.debug(f"Unsupported kind {kind!r}, nothing to resolve")
        return []

    def _resolve_deployment(
        self, ingresses: list[IngressInfo], name: str, namespace: str
    ) -> list[MatchResult]:
        services = self._controller.get_services(namespace)

        results: list[MatchResult] = []
        deployment: DeploymentInfo | None = None
        fetched = False

        for service in services:
            if not service.selector:
                logger.debug(f"Skipping service {service.name}: no selector")
                continue

            # The Deployment is invariant for the run; fetch it on first use
            if not fetched:
                deployment = self._controller.get_deployment(name, namespace)
                fetched = True
                if deployment is None:
                    logger.debug(f"Deployment {namespace}/{name} unavailable, no service can match")

            if deployment is None:
                continue

            if selector_matches(service.selector, deployment.match_labels):
                logger.debug(f"Service {service.name} selects deployment {name}")
                results.extend(find_backend_matches(ingresses, service.name))

        return results
