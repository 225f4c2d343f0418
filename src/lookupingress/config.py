"""Runtime configuration for the lookup command.

Settings come from command-line options, with the kubeconfig location
falling back to ``$KUBECONFIG`` and then ``$HOME/.kube/config``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, field_validator

from lookupingress.errors import KubeconfigError
from lookupingress.infra.constants import DEFAULT_CONSTANTS


class LookupSettings(BaseModel):
    """Validated settings for a single lookup run."""

    model_config = ConfigDict(frozen=True)

    namespace: str = DEFAULT_CONSTANTS.DEFAULT_NAMESPACE
    kubeconfig: str
    context: str | None = None
    output: str = DEFAULT_CONSTANTS.DEFAULT_OUTPUT

    @field_validator("namespace")
    @classmethod
    def _namespace_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("namespace must not be empty")
        return value

    @field_validator("output")
    @classmethod
    def _known_output(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in DEFAULT_CONSTANTS.OUTPUT_FORMATS:
            allowed = ", ".join(DEFAULT_CONSTANTS.OUTPUT_FORMATS)
            raise ValueError(f"output must be one of: {allowed}")
        return value


def resolve_kubeconfig_path(explicit: str | None = None) -> str:
    """Work out which kubeconfig to use.

    Args:
        explicit: Path given on the command line, if any

    Returns:
        The explicit path, else ``$KUBECONFIG``, else ``$HOME/.kube/config``
    """
    if explicit:
        return os.path.expanduser(explicit)

    from_env = os.environ.get(DEFAULT_CONSTANTS.KUBECONFIG_ENV_VAR, "")
    if from_env:
        return from_env

    return os.path.expandvars(DEFAULT_CONSTANTS.DEFAULT_KUBECONFIG)


def load_kubeconfig(path: str) -> list[dict[str, Any]]:
    """Read and parse every kubeconfig file named by ``path``.

    ``path`` may list several files separated by ``os.pathsep``, the way
    ``$KUBECONFIG`` does.

    Returns:
        The parsed documents, in order

    Raises:
        KubeconfigError: If a file is missing, unreadable, or not a YAML mapping
    """
    documents: list[dict[str, Any]] = []
    for entry in filter(None, path.split(os.pathsep)):
        file_path = Path(entry).expanduser()
        try:
            content = file_path.read_text()
        except OSError as e:
            raise KubeconfigError(
                "Error loading kubeconfig", details=f"{file_path}: {e}"
            ) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise KubeconfigError(
                "Error loading kubeconfig", details=f"{file_path}: invalid YAML: {e}"
            ) from e

        if not isinstance(data, dict):
            raise KubeconfigError(
                "Error loading kubeconfig",
                details=f"{file_path}: expected a mapping at the top level",
            )

        logger.debug(f"Loaded kubeconfig from {file_path}")
        documents.append(data)

    if not documents:
        raise KubeconfigError("Error loading kubeconfig", details="no kubeconfig path given")
    return documents
