"""Error presentation for action failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eba.output.console import ConsoleProtocol
    from eba.services.errors import ActionError

__all__ = ["print_action_error"]


def print_action_error(error: ActionError, console: ConsoleProtocol) -> None:
    """Print an action error and its hint."""
    console.error(error.message)
    if error.hint:
        console.hint(error.hint)
