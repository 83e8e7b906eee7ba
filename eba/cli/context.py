from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from eba.output.console import ConsoleProtocol, RichConsole
from eba.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: Platform
    environ: Mapping[str, str]
    console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(
        platform=detect_platform(),
        environ=dict(os.environ),
        console=RichConsole(),
    )
