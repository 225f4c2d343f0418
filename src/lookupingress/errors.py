"""Exceptions raised by the lookup.

Each class maps to one way the command can fail. The CLI turns all of
them into a printed error and exit code 1.
"""

from __future__ import annotations


class LookupIngressError(Exception):
    """Base class for lookup failures."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class UsageError(LookupIngressError):
    """Raised when the command line is incomplete or invalid."""


class KubeconfigError(LookupIngressError):
    """Raised when the kubeconfig file cannot be read or parsed."""


class ClusterConnectionError(LookupIngressError):
    """Raised when no API client can be built for the cluster."""


class ClusterQueryError(LookupIngressError):
    """Raised when listing Ingresses or Services fails."""
