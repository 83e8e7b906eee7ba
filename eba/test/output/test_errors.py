"""Tests for eba.output.errors module."""

from __future__ import annotations

import pytest
import typer

from eba.cli.commands._helpers import fail
from eba.cli.context import CLIContext
from eba.core.errors import ErrorCode
from eba.output.console import MockConsole, Style
from eba.output.errors import print_action_error
from eba.platform.detection import Platform
from eba.services.errors import ActionError


def test_prints_message_and_hint() -> None:
    console = MockConsole()

    print_action_error(ActionError(kind="manifest_missing", message="gone", hint="look"), console)

    assert [(o.message, o.style) for o in console.outputs] == [
        ("error: gone", Style.ERROR),
        ("hint: look", Style.DIM),
    ]


def test_no_hint_line_without_hint() -> None:
    console = MockConsole()

    print_action_error(ActionError(kind="install_failed", message="boom"), console)

    assert not console.find("hint:")


@pytest.mark.parametrize("kind", ["no_package_manager", "package_failed"])
def test_config_and_execution_errors_exit_fatal(kind: str) -> None:
    ctx = CLIContext(platform=Platform.LINUX, environ={}, console=MockConsole())

    with pytest.raises(typer.Exit) as exc:
        fail(ActionError(kind=kind, message="x"), ctx)  # type: ignore[arg-type]

    assert exc.value.exit_code == int(ErrorCode.FATAL)
