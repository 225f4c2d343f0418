"""Tests for CLI context dependency injection."""

from unittest.mock import Mock, patch

import pytest
import typer

from lookupingress.cli.context import CLIContext, build_cli_context, get_cli_context
from lookupingress.config import LookupSettings
from lookupingress.core.resolver import IngressResolver


@pytest.fixture
def settings() -> LookupSettings:
    return LookupSettings(namespace="shop", kubeconfig="/k/config", context="staging")


def _make_context() -> CLIContext:
    return CLIContext(
        console=Mock(),
        k8s_controller=Mock(),
        resolver=Mock(),
    )


def test_cli_context_is_immutable():
    """Test that CLIContext is frozen/immutable."""
    ctx = _make_context()

    with pytest.raises(AttributeError):
        ctx.console = Mock()  # type: ignore[misc]


@patch("lookupingress.cli.context.get_k8s_controller_sync")
def test_build_cli_context_creates_all_dependencies(mock_k8s_controller, settings):
    """Test that build_cli_context wires the controller into the resolver."""
    controller = Mock()
    mock_k8s_controller.return_value = controller

    ctx = build_cli_context(settings)

    mock_k8s_controller.assert_called_once_with("/k/config", "staging")
    assert ctx.k8s_controller is controller
    assert isinstance(ctx.resolver, IngressResolver)
    assert ctx.console is not None


def test_get_cli_context_from_typer_context(settings):
    """Test that get_cli_context retrieves from Typer context."""
    mock_ctx_obj = _make_context()

    typer_ctx = Mock(spec=typer.Context)
    typer_ctx.obj = mock_ctx_obj

    result = get_cli_context(settings, typer_ctx)

    assert result is mock_ctx_obj


def test_get_cli_context_with_invalid_obj_falls_back(settings):
    """Test that get_cli_context falls back when ctx.obj is not CLIContext."""
    typer_ctx = Mock(spec=typer.Context)
    typer_ctx.obj = "invalid"

    with patch("lookupingress.cli.context.build_cli_context") as mock_build:
        mock_build.return_value = Mock(spec=CLIContext)

        get_cli_context(settings, typer_ctx)

        mock_build.assert_called_once_with(settings)


@patch("click.get_current_context")
def test_get_cli_context_uses_click_context_as_fallback(mock_get_click_ctx, settings):
    """Test that get_cli_context uses click context when typer ctx is None."""
    mock_ctx_obj = _make_context()

    mock_click_context = Mock()
    mock_click_context.obj = mock_ctx_obj
    mock_get_click_ctx.return_value = mock_click_context

    result = get_cli_context(settings)

    assert result is mock_ctx_obj
    mock_get_click_ctx.assert_called_once_with(silent=True)


def test_get_cli_context_without_click_context_builds_new(settings):
    """Test that get_cli_context builds a context outside of a command."""
    with patch("lookupingress.cli.context.build_cli_context") as mock_build:
        mock_build.return_value = Mock(spec=CLIContext)

        get_cli_context(settings)

        mock_build.assert_called_once_with(settings)


@patch("click.get_current_context", return_value=None)
def test_get_cli_context_prefers_passed_typer_context(mock_get_click_ctx, settings):
    """Test that an explicit Typer context is used without consulting click."""
    mock_ctx_obj = _make_context()

    typer_ctx = Mock(spec=typer.Context)
    typer_ctx.obj = mock_ctx_obj

    assert get_cli_context(settings, typer_ctx) is mock_ctx_obj
    mock_get_click_ctx.assert_not_called()
