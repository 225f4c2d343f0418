"""Shared pytest fixtures: cluster objects and a fake controller."""

from unittest.mock import Mock

import pytest
from loguru import logger

from lookupingress.core.models import (
    DeploymentInfo,
    IngressInfo,
    IngressPathInfo,
    IngressRuleInfo,
    ServiceInfo,
)
from lookupingress.infra.k8s.controller import KubernetesControllerSync


def make_ingress(name: str, host: str, *paths: tuple[str, str | None]) -> IngressInfo:
    """Build a single-rule Ingress from (path, service_name) pairs."""
    return IngressInfo(
        name=name,
        rules=(
            IngressRuleInfo(
                host=host,
                paths=tuple(IngressPathInfo(path=p, service_name=s) for p, s in paths),
            ),
        ),
    )


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any sinks a test added so they don't outlive captured streams."""
    yield
    logger.remove()


@pytest.fixture
def web_ingress() -> IngressInfo:
    return make_ingress("web-ing", "a.example.com", ("/", "web-svc"))


@pytest.fixture
def api_ingress() -> IngressInfo:
    return make_ingress("api-ing", "api.example.com", ("/v1", "api-svc"))


@pytest.fixture
def api_service() -> ServiceInfo:
    return ServiceInfo(name="api-svc", selector={"app": "api"})


@pytest.fixture
def api_deployment() -> DeploymentInfo:
    return DeploymentInfo(name="api", match_labels={"app": "api"})


@pytest.fixture
def fake_controller() -> Mock:
    """A sync controller with an empty cluster; tests fill in return values."""
    controller = Mock(spec=KubernetesControllerSync)
    controller.get_ingresses.return_value = []
    controller.get_services.return_value = []
    controller.get_deployment.return_value = None
    return controller
