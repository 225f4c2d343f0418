from __future__ import annotations

from cachetools.func import lru_cache  # type: ignore

from lookupingress.infra.k8s.controller import KubernetesController, KubernetesControllerSync


@lru_cache(maxsize=4)
def get_k8s_controller(
    kubeconfig: str | None = None, context: str | None = None
) -> KubernetesController:
    """Get an instance of the KubernetesController.

    Args:
        kubeconfig: Path to the kubeconfig file
        context: Kubeconfig context name

    Returns:
        An instance of KubernetesController
    """
    from lookupingress.infra.k8s.kr8s_controller import Kr8sController

    return Kr8sController(kubeconfig=kubeconfig, context=context)


def get_k8s_controller_sync(
    kubeconfig: str | None = None, context: str | None = None
) -> KubernetesControllerSync:
    """Get a synchronous wrapper for KubernetesController.

    Returns:
        An instance of KubernetesControllerSync wrapping the async controller
    """
    return KubernetesControllerSync(get_k8s_controller(kubeconfig, context))
