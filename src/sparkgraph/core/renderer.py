"""Per-sample rendering through an external level tool."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable, Iterable, Sequence

logger = logging.getLogger(__name__)

Renderer = Callable[[str], bool]

DEFAULT_RENDERER = "level"


def format_number(value: float) -> str:
    return f"{value:g}"


class LevelRenderer:
    """Invoke the level tool once per value, writing to the inherited stdout."""

    def __init__(self, argv: Sequence[str], minimum: float, maximum: float,
                 theme: str):
        self.argv = list(argv)
        self.minimum = minimum
        self.maximum = maximum
        self.theme = theme

    def build_args(self, value: str) -> list[str]:
        """Argv for one value: no-newline, min, max, percent mode, value, theme."""
        return self.argv + [
            "-n",
            "-m", format_number(self.minimum),
            "-x", format_number(self.maximum),
            "-p",
            "-c", value,
            "-t", self.theme,
        ]

    def __call__(self, value: str) -> bool:
        args = self.build_args(value)
        # Our own buffered output must land before the child's.
        sys.stdout.flush()
        try:
            result = subprocess.run(args)
        except OSError as e:
            logger.warning("renderer %s failed for %r: %s", self.argv[0], value, e)
            return False
        if result.returncode != 0:
            logger.warning("renderer exited with %d for %r", result.returncode, value)
            return False
        return True


def render_window(samples: Iterable[str], renderer: Renderer) -> int:
    """Render each sample in order. Returns how many renders succeeded."""
    ok = 0
    for value in samples:
        if renderer(value):
            ok += 1
    return ok
