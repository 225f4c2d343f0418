"""Lookup domain: cluster object models, the resolver and result rendering."""

from .models import (
    DeploymentInfo,
    IngressInfo,
    IngressPathInfo,
    IngressRuleInfo,
    MatchResult,
    QueryKind,
    ServiceInfo,
)
from .resolver import IngressResolver, find_backend_matches, selector_matches
from .table import TableRenderer, render_json, render_table

__all__ = [
    # Data classes
    "DeploymentInfo",
    "IngressInfo",
    "IngressPathInfo",
    "IngressRuleInfo",
    "MatchResult",
    "QueryKind",
    "ServiceInfo",
    # Resolution
    "IngressResolver",
    "find_backend_matches",
    "selector_matches",
    # Rendering
    "TableRenderer",
    "render_json",
    "render_table",
]
