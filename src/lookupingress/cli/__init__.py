"""Main CLI application module.

This module provides the entry point for the ``kubectl-lookupingress``
plugin, invoked by kubectl as ``kubectl lookupingress``.

Usage:
    kubectl lookupingress [-n namespace] <deployment|service> <name>
"""

import typer

from .lookup import lookup

# Create the main CLI application
app = typer.Typer(
    help="🔎 Lookup Ingress - find the Ingresses routing to a Service or Deployment",
    add_completion=False,
    rich_markup_mode="rich",
)

# Trailing positionals beyond kind and name are ignored
app.command(name="lookup", context_settings={"allow_extra_args": True})(lookup)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
