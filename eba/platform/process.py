"""Subprocess execution with Result-based error handling.

Commands run with the console streams inherited, so installer and packaging
output appears live in the CI log. Only the exit status is inspected.

Usage:
    result = run_streaming(["yarn", "install"], cwd=root, env=env)
    match result:
        case Ok(_):
            pass
        case Err(error):
            print(error)
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from eba.core.result import Err, Ok, Result

__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "ProcessError",
    "resolve_executable",
    "run_streaming",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process (-1 if it could not start).
        detail: Extra context, e.g. the OSError text when spawning failed.
    """

    command: tuple[str, ...]
    returncode: int
    detail: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode < 0 and self.detail:
            return f"{cmd_str} could not be started: {self.detail}"
        return f"{cmd_str} failed (exit {self.returncode})"

    @property
    def display(self) -> str:
        """Full command line, shell-quoted."""
        return shlex.join(self.command)


def resolve_executable(name: str, path: str | None = None) -> str:
    """Return the full path of name on path (default: PATH), or name unchanged.

    On Windows npm, yarn and friends are .cmd shims, which subprocess only
    finds when given the resolved path.
    """
    return shutil.which(name, path=path) or name


def run_streaming(
    cmd: list[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command, streaming its output to the console.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Complete child environment (inherits the current one if None).

    Returns:
        Ok(None) on exit status 0, Err(ProcessError) otherwise.
    """
    search_path = env.get("PATH") if env is not None else None
    argv = [resolve_executable(cmd[0], search_path), *cmd[1:]] if cmd else cmd
    try:
        proc = subprocess.run(
            argv,
            cwd=str(cwd),
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, detail=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)


class CommandRunner(Protocol):
    """Protocol for spawning commands.

    Services depend on this rather than on subprocess so tests can record
    invocations and script exit codes.
    """

    def run(
        self,
        cmd: list[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
    ) -> Result[None, ProcessError]:
        """Run a command to completion with inherited console streams."""
        ...


class DefaultCommandRunner:
    """CommandRunner backed by run_streaming."""

    def run(
        self,
        cmd: list[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
    ) -> Result[None, ProcessError]:
        return run_streaming(cmd, cwd=cwd, env=env)
