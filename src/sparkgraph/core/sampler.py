"""Sample producers: anything that returns the next chunk of data as text."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable

from sparkgraph.core.history import ENCODING, ERRORS

logger = logging.getLogger(__name__)

Sampler = Callable[[], str]


class SamplerError(Exception):
    pass


class ShellSampler:
    """Run a shell command once and hand back its stdout."""

    def __init__(self, command: str):
        self.command = command

    def __call__(self) -> str:
        logger.debug("running sample command: %s", self.command)
        try:
            result = subprocess.run(
                self.command, shell=True, capture_output=True,
                encoding=ENCODING, errors=ERRORS,
            )
        except OSError as e:
            raise SamplerError(f"could not run {self.command!r}: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.warning(
                "sample command exited with %d%s",
                result.returncode, f": {stderr}" if stderr else "",
            )
        return result.stdout

    def __repr__(self) -> str:
        return f"ShellSampler({self.command!r})"
