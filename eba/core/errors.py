"""Exit codes for the action.

The action has a single failure code: CI only distinguishes "passed" from
"failed", and every fatal condition prints its own diagnostic first.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values should remain stable."""

    OK = 0
    FATAL = 1

    def __str__(self) -> str:
        return self.name.lower()
