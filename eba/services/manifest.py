"""package.json access."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from eba.core.result import Err, Ok, Result
from eba.core.structured import as_str_dict, get_table
from eba.services.errors import ActionError

__all__ = ["MANIFEST_NAME", "Manifest", "manifest_path", "require_manifest", "load_manifest"]

MANIFEST_NAME = "package.json"


@dataclass(frozen=True, slots=True)
class Manifest:
    path: Path
    scripts: frozenset[str]

    def has_script(self, name: str) -> bool:
        return name in self.scripts


def manifest_path(package_root: Path) -> Path:
    return package_root / MANIFEST_NAME


def require_manifest(package_root: Path) -> Result[Path, ActionError]:
    """Check that package.json exists in the package root."""
    path = manifest_path(package_root)
    if not path.is_file():
        return Err(
            ActionError(
                kind="manifest_missing",
                message=f'`{MANIFEST_NAME}` file not found at path "{path}"',
                hint="Point the package_root input at the directory holding package.json",
            )
        )
    return Ok(path)


def load_manifest(package_root: Path) -> Result[Manifest, ActionError]:
    """Read package.json and collect the names of its scripts.

    A missing or non-object "scripts" entry means no scripts.
    """
    found = require_manifest(package_root)
    if isinstance(found, Err):
        return found
    path = found.value

    try:
        raw: object = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        return Err(
            ActionError(
                kind="manifest_invalid",
                message=f'Cannot read "{path}": {e}',
            )
        )

    data = as_str_dict(raw)
    if data is None:
        return Err(
            ActionError(
                kind="manifest_invalid",
                message=f'"{path}" does not contain a JSON object',
            )
        )

    scripts = get_table(data, "scripts") or {}
    # A script with an empty command is treated as absent
    names = frozenset(name for name, command in scripts.items() if command)
    return Ok(Manifest(path=path, scripts=names))
