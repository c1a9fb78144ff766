"""Sample, rotate and render one graph."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from sparkgraph.config import GraphConfig
from sparkgraph.core import history
from sparkgraph.core.renderer import LevelRenderer, Renderer, render_window
from sparkgraph.core.sampler import Sampler, ShellSampler
from sparkgraph.display.json_out import print_json

logger = logging.getLogger(__name__)


def collect_sample(config: GraphConfig, sampler: Sampler | None = None) -> int:
    """Run the configured command once and append its output to the data file."""
    sampler = sampler or ShellSampler(config.command_line)
    return history.append_lines(config.data_file, sampler())


def fetch_window(config: GraphConfig) -> list[str]:
    # A fresh sample always rotates; -r only applies to file-only runs.
    rotate = config.rotate or bool(config.command)
    return history.read_window(config.data_file, config.points, rotate=rotate)


def run_graph(config: GraphConfig, sampler: Sampler | None = None,
              renderer: Renderer | None = None,
              out: TextIO | None = None) -> list[str]:
    """Execute one invocation and return the samples that were shown."""
    if out is None:
        out = sys.stdout

    if config.command:
        collect_sample(config, sampler)

    samples = fetch_window(config)

    if config.json_output:
        print_json({
            "data_file": str(config.data_file),
            "points": config.points,
            "samples": samples,
        }, out=out)
        return samples

    if samples:
        renderer = renderer or LevelRenderer(
            config.renderer, config.minimum, config.maximum, config.theme,
        )
        rendered = render_window(samples, renderer)
        if rendered < len(samples):
            logger.info("%d of %d samples rendered", rendered, len(samples))

    out.write(config.newline)
    out.flush()
    return samples
