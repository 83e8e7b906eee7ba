"""Run command - install, build and package the Electron app."""

from __future__ import annotations

import typer

from eba.cli.commands._helpers import exit_on_error, unwrap_or_exit
from eba.cli.context import build_context
from eba.core.inputs import InputError, load_inputs
from eba.services.errors import ActionError
from eba.services.runner import ActionRunner


def _input_error(error: InputError) -> ActionError:
    match error.kind:
        case "missing":
            return ActionError(
                kind="missing_input",
                message=error.message,
                hint=f"Pass `{error.name}` in the action's `with:` block",
            )
        case "invalid":
            return ActionError(kind="invalid_input", message=error.message)


def run(
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the planned commands without executing them"
    ),
) -> None:
    """Install dependencies, run the build script and package the app.

    Inputs are read from INPUT_* environment variables, as set by GitHub Actions.
    """
    ctx = build_context()

    inputs = unwrap_or_exit(load_inputs(ctx.environ).map_err(_input_error), ctx)
    runner = ActionRunner(platform=ctx.platform, console=ctx.console, environ=ctx.environ)
    exit_on_error(runner.run(inputs, dry_run=dry_run), ctx)
