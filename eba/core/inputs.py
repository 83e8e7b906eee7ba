"""Typed action inputs.

GitHub Actions exposes each `with:` input to the process as an environment
variable named INPUT_<NAME>. This module parses those into a frozen
dataclass once, at startup.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result

__all__ = [
    "ActionInputs",
    "InputError",
    "env_name",
    "get_input",
    "load_inputs",
]


@dataclass(frozen=True, slots=True)
class InputError:
    """A required input is missing or an input has an unusable value."""

    kind: Literal["missing", "invalid"]
    name: str
    message: str


@dataclass(frozen=True, slots=True)
class ActionInputs:
    """Resolved action configuration.

    Attributes:
        release: Publish the bundle after building it.
        package_root: Directory holding package.json and the lock file.
        build_script_name: package.json script run before packaging.
        github_token: Token the packaging tool publishes with.
        skip_build: Do not run the build script.
        skip_install: Do not install dependencies.
        use_vue_cli: Package with vue-cli-service instead of electron-builder.
        args: Extra packaging arguments, as written by the user.
        max_attempts: Packaging attempt budget (at least 1).
        app_root: Directory the packaging command runs in.
    """

    release: bool
    package_root: Path
    build_script_name: str
    github_token: str
    skip_build: bool = False
    skip_install: bool = False
    use_vue_cli: bool = False
    args: str = ""
    max_attempts: int = 1
    app_root: Path | None = None
    mac_certs: str | None = None
    mac_certs_password: str | None = None
    windows_certs: str | None = None
    windows_certs_password: str | None = None

    @property
    def packaging_root(self) -> Path:
        """Directory for the packaging command (app_root, else package_root)."""
        return self.app_root if self.app_root is not None else self.package_root

    @property
    def app_root_overridden(self) -> bool:
        return self.app_root is not None


def env_name(name: str) -> str:
    """Environment variable carrying an input: release -> INPUT_RELEASE."""
    return f"INPUT_{name}".upper()


def get_input(environ: Mapping[str, str], name: str) -> str | None:
    """Return an input's value, or None when it is unset or empty."""
    value = environ.get(env_name(name))
    if value is None:
        return None
    return value or None


def _require(environ: Mapping[str, str], name: str) -> Result[str, InputError]:
    value = get_input(environ, name)
    if value is None:
        return Err(
            InputError(
                kind="missing",
                name=name,
                message=f'"{name}" input variable is not defined',
            )
        )
    return Ok(value)


def _flag(environ: Mapping[str, str], name: str) -> bool:
    value = get_input(environ, name)
    return value is not None and value.strip().lower() == "true"


def _attempts(environ: Mapping[str, str]) -> Result[int, InputError]:
    raw = get_input(environ, "max_attempts")
    if raw is None:
        return Ok(1)
    try:
        attempts = int(raw.strip())
    except ValueError:
        return Err(
            InputError(
                kind="invalid",
                name="max_attempts",
                message=f'"max_attempts" must be an integer, got "{raw}"',
            )
        )
    return Ok(max(attempts, 1))


def load_inputs(environ: Mapping[str, str]) -> Result[ActionInputs, InputError]:
    """Resolve all action inputs from an environment mapping.

    Args:
        environ: Usually os.environ.

    Returns:
        Ok(ActionInputs), or Err(InputError) for the first missing required
        input or the first invalid value.
    """
    required: dict[str, str] = {}
    for name in ("release", "package_root", "build_script_name", "github_token"):
        result = _require(environ, name)
        if isinstance(result, Err):
            return result
        required[name] = result.value

    attempts = _attempts(environ)
    if isinstance(attempts, Err):
        return attempts

    app_root = get_input(environ, "app_root")

    return Ok(
        ActionInputs(
            release=required["release"].strip().lower() == "true",
            package_root=Path(required["package_root"]),
            build_script_name=required["build_script_name"],
            github_token=required["github_token"],
            skip_build=_flag(environ, "skip_build"),
            skip_install=_flag(environ, "skip_install"),
            use_vue_cli=_flag(environ, "use_vue_cli"),
            args=get_input(environ, "args") or "",
            max_attempts=attempts.value,
            app_root=Path(app_root) if app_root is not None else None,
            mac_certs=get_input(environ, "mac_certs"),
            mac_certs_password=get_input(environ, "mac_certs_password"),
            windows_certs=get_input(environ, "windows_certs"),
            windows_certs_password=get_input(environ, "windows_certs_password"),
        )
    )
