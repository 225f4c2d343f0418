"""Abstract Kubernetes controller interface.

Defines the read-only contract the lookup needs from a cluster backend,
plus a blocking wrapper for use from the CLI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lookupingress.core.models import DeploymentInfo, IngressInfo, ServiceInfo

from .utils import run_sync

# =============================================================================
# Abstract Controller
# =============================================================================


class KubernetesController(ABC):
    """Abstract base class for Kubernetes read operations.

    All methods are async so that async client libraries can back them.
    Use `KubernetesControllerSync` (or `run_sync()`) from synchronous code.
    """

    # =========================================================================
    # Cluster Connection
    # =========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """Build an API client and make sure it can reach the cluster.

        Raises:
            ClusterConnectionError: If no client can be constructed
        """
        ...

    # =========================================================================
    # Networking Operations
    # =========================================================================

    @abstractmethod
    async def get_ingresses(self, namespace: str) -> list[IngressInfo]:
        """Get all Ingresses in a namespace, in API order.

        Args:
            namespace: Kubernetes namespace

        Returns:
            List of IngressInfo objects

        Raises:
            ClusterQueryError: If the list request fails
        """
        ...

    # =========================================================================
    # Service Operations
    # =========================================================================

    @abstractmethod
    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        """Get all Services in a namespace, in API order.

        Args:
            namespace: Kubernetes namespace

        Returns:
            List of ServiceInfo objects

        Raises:
            ClusterQueryError: If the list request fails
        """
        ...

    # =========================================================================
    # Deployment Operations
    # =========================================================================

    @abstractmethod
    async def get_deployment(self, name: str, namespace: str) -> DeploymentInfo | None:
        """Get a single Deployment.

        Args:
            name: Deployment name
            namespace: Kubernetes namespace

        Returns:
            DeploymentInfo, or None if it cannot be fetched
        """
        ...


# =============================================================================
# Sync Wrapper
# =============================================================================


class KubernetesControllerSync:
    """Blocking facade over a `KubernetesController`.

    Each call runs the underlying coroutine to completion before returning,
    so requests are issued strictly one after another.
    """

    def __init__(self, controller: KubernetesController) -> None:
        self._controller = controller

    @property
    def controller(self) -> KubernetesController:
        return self._controller

    def connect(self) -> None:
        run_sync(self._controller.connect())

    def get_ingresses(self, namespace: str) -> list[IngressInfo]:
        return run_sync(self._controller.get_ingresses(namespace))

    def get_services(self, namespace: str) -> list[ServiceInfo]:
        return run_sync(self._controller.get_services(namespace))

    def get_deployment(self, name: str, namespace: str) -> DeploymentInfo | None:
        return run_sync(self._controller.get_deployment(name, namespace))
