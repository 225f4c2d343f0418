"""Read-only projections of the cluster objects the lookup works on.

Everything here is built once per invocation from the Kubernetes API
responses and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum

# =============================================================================
# Query
# =============================================================================


class QueryKind(str, Enum):
    """Kind of resource the lookup targets."""

    SERVICE = "service"
    DEPLOYMENT = "deployment"

    @classmethod
    def parse(cls, raw: str) -> QueryKind | None:
        """Parse a user-supplied kind, case-insensitively.

        Args:
            raw: Kind as typed on the command line

        Returns:
            The matching QueryKind, or None for anything else
        """
        try:
            return cls(raw.lower())
        except ValueError:
            return None


# =============================================================================
# Cluster Objects
# =============================================================================


@dataclass(frozen=True)
class IngressPathInfo:
    """A single HTTP path of an Ingress rule."""

    path: str = ""
    service_name: str | None = None  # None for non-Service backends


@dataclass(frozen=True)
class IngressRuleInfo:
    """An Ingress rule: a host plus its HTTP paths."""

    host: str = ""
    paths: tuple[IngressPathInfo, ...] = ()


@dataclass(frozen=True)
class IngressInfo:
    """Information about a Kubernetes Ingress."""

    name: str
    rules: tuple[IngressRuleInfo, ...] = ()


@dataclass(frozen=True)
class ServiceInfo:
    """Information about a Kubernetes Service."""

    name: str
    selector: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DeploymentInfo:
    """Information about a Kubernetes Deployment."""

    name: str
    match_labels: Mapping[str, str] = field(default_factory=dict)


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class MatchResult:
    """One Ingress path whose backend resolves to the queried target."""

    ingress_name: str
    host: str
    path: str
    service_name: str

    def as_record(self) -> dict[str, str]:
        """Return the row keyed the way JSON output expects it."""
        data = asdict(self)
        return {
            "ingress": data["ingress_name"],
            "host": data["host"],
            "path": data["path"],
            "service": data["service_name"],
        }
