"""Lookup constants.

This module centralizes the defaults and fixed user-facing strings used
by the lookup command.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LookupConstants:
    """Constants for the Ingress lookup.

    All attributes are class-level and immutable.
    """

    # Kubernetes defaults
    DEFAULT_NAMESPACE: str = "default"
    DEFAULT_KUBECONFIG: str = "$HOME/.kube/config"
    KUBECONFIG_ENV_VAR: str = "KUBECONFIG"

    # Output
    DEFAULT_OUTPUT: str = "table"
    OUTPUT_FORMATS: tuple[str, ...] = ("table", "json")
    NO_RESULTS_MESSAGE: str = "No associated ingress found."
    USAGE: str = (
        "Usage: kubectl lookupingress [-n namespace] <deployment|service> <name>"
    )

    # Table layout
    TABLE_HEADERS: tuple[str, ...] = ("Ingress Name", "Host", "Path", "Service Name")
    TABLE_PADDING: int = 2


# Default instance for convenience
DEFAULT_CONSTANTS = LookupConstants()
