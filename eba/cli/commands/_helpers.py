"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from eba.core.errors import ErrorCode
from eba.core.result import Err, Result
from eba.output.errors import print_action_error
from eba.services.errors import ActionError

if TYPE_CHECKING:
    from eba.cli.context import CLIContext


def fail(error: ActionError, ctx: CLIContext) -> NoReturn:
    """Print error (and its hint) to stderr and exit non-zero."""
    print_action_error(error, ctx.console)
    raise typer.Exit(code=int(ErrorCode.FATAL))


def exit_on_error[T](result: Result[T, ActionError], ctx: CLIContext) -> None:
    """Exit with error if result is Err, otherwise return."""
    if isinstance(result, Err):
        fail(result.error, ctx)


def unwrap_or_exit[T](result: Result[T, ActionError], ctx: CLIContext) -> T:
    """Return the Ok value, or exit like exit_on_error."""
    if isinstance(result, Err):
        fail(result.error, ctx)
    return result.value
