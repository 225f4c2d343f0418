"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from lookupingress.cli.shared.console import CLIConsole, console
from lookupingress.config import LookupSettings
from lookupingress.core.resolver import IngressResolver
from lookupingress.infra.k8s import get_k8s_controller_sync
from lookupingress.infra.k8s.controller import KubernetesControllerSync


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    k8s_controller: KubernetesControllerSync
    resolver: IngressResolver


def build_cli_context(settings: LookupSettings) -> CLIContext:
    """Build a fresh CLIContext for the given settings."""
    controller = get_k8s_controller_sync(settings.kubeconfig, settings.context)

    return CLIContext(
        console=console,
        k8s_controller=controller,
        resolver=IngressResolver(controller),
    )


def get_cli_context(settings: LookupSettings, ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context(settings)
