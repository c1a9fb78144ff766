"""Run configuration, built once from the command line."""

from __future__ import annotations

import getpass
import os
from dataclasses import dataclass, field
from pathlib import Path

from sparkgraph.core.renderer import DEFAULT_RENDERER

TOOL_NAME = "sparkgraph"
DEFAULT_POINTS = 5
DEFAULT_MIN = 0.0
DEFAULT_MAX = 100.0
DEFAULT_THEME = "vbars_8"


def default_data_path() -> Path:
    """/tmp/<user>-sparkgraph-<pid>.dat"""
    return Path("/tmp") / f"{getpass.getuser()}-{TOOL_NAME}-{os.getpid()}.dat"


@dataclass(frozen=True)
class GraphConfig:
    data_file: Path
    command: tuple[str, ...] = ()
    minimum: float = DEFAULT_MIN
    maximum: float = DEFAULT_MAX
    points: int = DEFAULT_POINTS
    rotate: bool = True
    newline: str = "\n"
    theme: str = DEFAULT_THEME
    renderer: tuple[str, ...] = field(default=(DEFAULT_RENDERER,))
    json_output: bool = False
    verbose: bool = False

    @property
    def command_line(self) -> str:
        return " ".join(self.command)
