"""Kubernetes infrastructure abstraction layer.

This module provides a read-only abstraction over the Kubernetes API,
backed by the kr8s library.

Example:
    from lookupingress.infra.k8s import get_k8s_controller_sync

    controller = get_k8s_controller_sync(kubeconfig="~/.kube/config")
    ingresses = controller.get_ingresses("default")
"""

from .controller import KubernetesController, KubernetesControllerSync
from .helpers import get_k8s_controller, get_k8s_controller_sync
from .kr8s_controller import Kr8sController
from .utils import run_sync

__all__ = [
    # Controller classes
    "KubernetesController",
    "KubernetesControllerSync",
    "Kr8sController",
    # Factories
    "get_k8s_controller",
    "get_k8s_controller_sync",
    # Utilities
    "run_sync",
]
