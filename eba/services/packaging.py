"""Packaging command construction."""

from __future__ import annotations

import shlex

from eba.platform.detection import Platform
from eba.services.package_manager import PackageManager

__all__ = ["builder_command", "packaging_command", "split_args"]


def builder_command(use_vue_cli: bool) -> list[str]:
    if use_vue_cli:
        return ["vue-cli-service", "electron:build"]
    return ["electron-builder"]


def _split_windows(args: str) -> list[str]:
    # Windows command-line rules: backslashes are literal, double quotes
    # group words and are dropped.
    tokens: list[str] = []
    current: list[str] = []
    in_word = False
    quoted = False
    for char in args:
        if char == '"':
            quoted = not quoted
            in_word = True
        elif char.isspace() and not quoted:
            if in_word:
                tokens.append("".join(current))
                current, in_word = [], False
        else:
            current.append(char)
            in_word = True
    if quoted:
        raise ValueError("No closing quotation")
    if in_word:
        tokens.append("".join(current))
    return tokens


def split_args(args: str, platform: Platform) -> list[str]:
    """Split the free-form args input the way the platform's shell would.

    Raises:
        ValueError: On an unterminated quote.
    """
    match platform:
        case Platform.WINDOWS:
            return _split_windows(args)
        case Platform.MAC | Platform.LINUX:
            return shlex.split(args)


def packaging_command(
    manager: PackageManager,
    platform: Platform,
    *,
    release: bool,
    use_vue_cli: bool,
    args: str = "",
) -> list[str]:
    """Build the argv that packages (and optionally publishes) the app.

    Example (yarn, mac, release):
        ["yarn", "run", "electron-builder", "--mac", "--publish", "always"]
    """
    cmd = [*manager.exec_prefix, *builder_command(use_vue_cli), platform.builder_flag]
    if release:
        cmd += ["--publish", "always"]
    cmd += split_args(args, platform)
    return cmd
