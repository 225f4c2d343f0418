"""Utility functions for the Kubernetes infrastructure layer.

Provides a helper for running the async controller from the synchronous
CLI.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine to completion on a fresh event loop.

    Args:
        coro: The coroutine to execute

    Returns:
        The result of the coroutine

    Example:
        from lookupingress.infra.k8s import Kr8sController, run_sync

        controller = Kr8sController()
        ingresses = run_sync(controller.get_ingresses("default"))
    """
    return asyncio.run(coro)
