"""The lookup command.

Resolves the Ingresses routing to a Service or Deployment and prints
them as a table (or JSON).
"""

from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from lookupingress.cli.context import get_cli_context
from lookupingress.cli.shared import configure_logging, console, with_error_handling
from lookupingress.config import LookupSettings, load_kubeconfig, resolve_kubeconfig_path
from lookupingress.core.table import render_json, render_table
from lookupingress.errors import UsageError
from lookupingress.infra.constants import DEFAULT_CONSTANTS


def _format_validation_error(error: ValidationError) -> str:
    return "\n".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )


@with_error_handling
def _run_lookup(
    ctx: typer.Context,
    kind: str,
    name: str,
    *,
    namespace: str,
    kubeconfig: str | None,
    context: str | None,
    output: str,
) -> None:
    try:
        settings = LookupSettings(
            namespace=namespace,
            kubeconfig=resolve_kubeconfig_path(kubeconfig),
            context=context,
            output=output,
        )
    except ValidationError as e:
        raise UsageError("Invalid arguments", details=_format_validation_error(e)) from e

    load_kubeconfig(settings.kubeconfig)

    cli_ctx = get_cli_context(settings, ctx)
    cli_ctx.k8s_controller.connect()

    logger.debug(f"Looking up ingresses for {kind} {name} in namespace {settings.namespace}")
    results = cli_ctx.resolver.resolve(kind, name, settings.namespace)
    logger.debug(f"Found {len(results)} matching ingress path(s)")

    if settings.output == "json":
        cli_ctx.console.out(render_json(results))
    else:
        cli_ctx.console.out(render_table(results))


def lookup(
    ctx: typer.Context,
    kind: Annotated[
        str | None,
        typer.Argument(help="Kind of resource to look up: service or deployment"),
    ] = None,
    name: Annotated[
        str | None,
        typer.Argument(help="Name of the Service or Deployment"),
    ] = None,
    namespace: Annotated[
        str,
        typer.Option("--namespace", "-n", help="Namespace of the resource"),
    ] = DEFAULT_CONSTANTS.DEFAULT_NAMESPACE,
    kubeconfig: Annotated[
        str | None,
        typer.Option(
            "--kubeconfig",
            help="Path to the kubeconfig file (default: $KUBECONFIG or $HOME/.kube/config)",
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option("--context", help="Kubeconfig context to use (default: current context)"),
    ] = None,
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output format: table or json"),
    ] = DEFAULT_CONSTANTS.DEFAULT_OUTPUT,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr"),
    ] = False,
) -> None:
    """🔎 Find the Ingresses that route traffic to a Service or Deployment."""
    configure_logging(verbose)

    if output.strip().lower() == "table":
        console.out(f"Using namespace: {namespace}")

    if not kind or not name:
        console.out(DEFAULT_CONSTANTS.USAGE)
        raise typer.Exit(1)

    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {ctx.args}")

    _run_lookup(
        ctx,
        kind,
        name,
        namespace=namespace,
        kubeconfig=kubeconfig,
        context=context,
        output=output,
    )
