"""Kr8s-based implementation of KubernetesController.

Uses the kr8s library for native async, read-only Kubernetes queries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import kr8s
from kr8s.asyncio.objects import Deployment, Ingress, Service
from loguru import logger

from lookupingress.core.models import (
    DeploymentInfo,
    IngressInfo,
    IngressPathInfo,
    IngressRuleInfo,
    ServiceInfo,
)
from lookupingress.errors import ClusterConnectionError, ClusterQueryError

from .controller import KubernetesController

# =============================================================================
# Manifest Conversion
# =============================================================================


def _string_map(value: Any) -> dict[str, str]:
    if not value:
        return {}
    return {str(k): str(v) for k, v in dict(value).items()}


def ingress_from_manifest(manifest: Mapping[str, Any]) -> IngressInfo:
    """Build an IngressInfo from a networking.k8s.io/v1 Ingress manifest.

    Rules without an ``http`` block contribute no paths. Paths whose
    backend is not a Service (e.g. a ``resource`` backend) keep
    ``service_name=None``.
    """
    metadata = manifest.get("metadata") or {}
    spec = manifest.get("spec") or {}

    rules = []
    for rule in spec.get("rules") or []:
        http = rule.get("http") or {}
        paths = []
        for path in http.get("paths") or []:
            backend = (path.get("backend") or {}).get("service") or {}
            paths.append(
                IngressPathInfo(
                    path=path.get("path") or "",
                    service_name=backend.get("name") or None,
                )
            )
        rules.append(IngressRuleInfo(host=rule.get("host") or "", paths=tuple(paths)))

    return IngressInfo(name=metadata.get("name", ""), rules=tuple(rules))


def service_from_manifest(manifest: Mapping[str, Any]) -> ServiceInfo:
    """Build a ServiceInfo from a v1 Service manifest."""
    metadata = manifest.get("metadata") or {}
    spec = manifest.get("spec") or {}
    return ServiceInfo(
        name=metadata.get("name", ""),
        selector=_string_map(spec.get("selector")),
    )


def deployment_from_manifest(manifest: Mapping[str, Any]) -> DeploymentInfo:
    """Build a DeploymentInfo from an apps/v1 Deployment manifest.

    The match labels come from ``spec.selector.matchLabels``.
    """
    metadata = manifest.get("metadata") or {}
    selector = (manifest.get("spec") or {}).get("selector") or {}
    return DeploymentInfo(
        name=metadata.get("name", ""),
        match_labels=_string_map(selector.get("matchLabels")),
    )


# =============================================================================
# Controller
# =============================================================================


class Kr8sController(KubernetesController):
    """Kubernetes controller using kr8s library.

    Note: The kr8s API client is NOT cached because it's tied to the event loop
    that was running when created. `run_sync()` creates a new event loop for
    every call, so each request builds its own client from the same settings.
    """

    def __init__(self, kubeconfig: str | None = None, context: str | None = None) -> None:
        """Initialize the kr8s controller.

        Args:
            kubeconfig: Path to the kubeconfig file, or None for kr8s defaults
            context: Kubeconfig context name, or None for the current context
        """
        self.kubeconfig = kubeconfig
        self.context = context

    async def _get_api(self) -> Any:  # Returns kr8s._api.Api
        """Create a kr8s API client bound to the running event loop."""
        return await kr8s.asyncio.api(kubeconfig=self.kubeconfig, context=self.context)

    # =========================================================================
    # Cluster Connection
    # =========================================================================

    async def connect(self) -> None:
        """Build an API client from the configured kubeconfig."""
        try:
            await self._get_api()
        except Exception as e:
            raise ClusterConnectionError(
                "Error creating Kubernetes client", details=str(e)
            ) from e
        logger.debug(
            f"Kubernetes client ready (kubeconfig={self.kubeconfig}, context={self.context or 'current'})"
        )

    # =========================================================================
    # Networking Operations
    # =========================================================================

    async def get_ingresses(self, namespace: str) -> list[IngressInfo]:
        """Get all Ingresses in a namespace."""
        try:
            api = await self._get_api()
            result = [
                ingress_from_manifest(ing.raw)
                async for ing in Ingress.list(namespace=namespace, api=api)
            ]
        except Exception as e:
            raise ClusterQueryError("Error listing ingresses", details=str(e)) from e

        logger.debug(f"Listed {len(result)} ingress(es) in namespace {namespace}")
        return result

    # =========================================================================
    # Service Operations
    # =========================================================================

    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        """Get all Services in a namespace."""
        try:
            api = await self._get_api()
            result = [
                service_from_manifest(svc.raw)
                async for svc in Service.list(namespace=namespace, api=api)
            ]
        except Exception as e:
            raise ClusterQueryError("Error listing services", details=str(e)) from e

        logger.debug(f"Listed {len(result)} service(s) in namespace {namespace}")
        return result

    # =========================================================================
    # Deployment Operations
    # =========================================================================

    async def get_deployment(self, name: str, namespace: str) -> DeploymentInfo | None:
        """Get a single Deployment, or None if it cannot be fetched.

        Issues a single name-filtered request; a missing Deployment is not
        polled for.
        """
        try:
            api = await self._get_api()
            found = [d async for d in api.get(Deployment, name, namespace=namespace)]
        except Exception as e:
            logger.debug(f"Could not fetch deployment {namespace}/{name}: {e}")
            return None

        if not found:
            logger.debug(f"Deployment {namespace}/{name} not found")
            return None

        return deployment_from_manifest(found[0].raw)
