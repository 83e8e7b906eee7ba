# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = ["ActionError", "ActionErrorKind"]

type ActionErrorKind = Literal[
    "missing_input",
    "invalid_input",
    "manifest_missing",
    "manifest_invalid",
    "no_package_manager",
    "install_failed",
    "build_failed",
    "package_failed",
]

_CONFIG_KINDS: frozenset[str] = frozenset(
    {
        "missing_input",
        "invalid_input",
        "manifest_missing",
        "manifest_invalid",
        "no_package_manager",
    }
)


@dataclass(frozen=True, slots=True)
class ActionError:
    kind: ActionErrorKind
    message: str
    hint: str | None = None

    @property
    def is_config_error(self) -> bool:
        """True for errors found before any command was spawned."""
        return self.kind in _CONFIG_KINDS
