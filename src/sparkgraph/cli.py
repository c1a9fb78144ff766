"""CLI entry point — a single click command mirroring the classic graph flags."""

from __future__ import annotations

import logging
import shlex
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sparkgraph.config import (
    DEFAULT_MAX, DEFAULT_MIN, DEFAULT_POINTS, DEFAULT_THEME, GraphConfig,
    default_data_path,
)
from sparkgraph.core.renderer import DEFAULT_RENDERER
from sparkgraph.core.sampler import SamplerError
from sparkgraph.log import setup_logging

err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Everything after the first positional word belongs to the command.
    "allow_interspersed_args": False,
}


class GraphUsageError(click.UsageError):
    exit_code = 1


class GraphCommand(click.Command):
    """Command whose option-parsing errors exit with 1 instead of click's 2."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _make_config(data_file, command, minimum, maximum, points, no_rotate,
                 no_newline, theme, renderer, json_output, verbose) -> GraphConfig:
    ctx = click.get_current_context()
    if data_file is None and not command:
        raise GraphUsageError("a data file (-f) or a command is required", ctx=ctx)
    if command and no_rotate:
        raise GraphUsageError("-r cannot be combined with a command", ctx=ctx)
    argv = tuple(shlex.split(renderer))
    if not argv:
        raise GraphUsageError("--renderer must not be empty", ctx=ctx)
    return GraphConfig(
        data_file=data_file if data_file is not None else default_data_path(),
        command=tuple(command),
        minimum=minimum,
        maximum=maximum,
        points=points,
        rotate=not no_rotate,
        newline="" if no_newline else "\n",
        theme=theme,
        renderer=argv,
        json_output=json_output,
        verbose=verbose,
    )


@click.command(cls=GraphCommand, context_settings=CONTEXT_SETTINGS)
@click.option("-f", "--file", "data_file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Data file holding one sample per line")
@click.option("-m", "--min", "minimum", type=float, default=DEFAULT_MIN,
              show_default=True, help="Minimum value")
@click.option("-x", "--max", "maximum", type=float, default=DEFAULT_MAX,
              show_default=True, help="Maximum value")
@click.option("-p", "--points", type=click.IntRange(min=1), default=DEFAULT_POINTS,
              show_default=True, help="Number of samples to keep and draw")
@click.option("-r", "--no-rotate", is_flag=True,
              help="Do not trim the data file (not allowed with a command)")
@click.option("-n", "--no-newline", is_flag=True, help="Do not print a trailing newline")
@click.option("-t", "--theme", default=DEFAULT_THEME, show_default=True,
              help="Renderer theme")
@click.option("--renderer", default=DEFAULT_RENDERER, show_default=True,
              envvar="SPARKGRAPH_RENDERER", help="Level renderer command line")
@click.option("--json", "json_output", is_flag=True, help="Print the samples as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def main(data_file, minimum, maximum, points, no_rotate, no_newline, theme,
         renderer, json_output, verbose, command):
    """Graph the last few samples of a data stream.

    \b
    Usage:
      sparkgraph -f FILE                 Graph the tail of FILE
      sparkgraph [-f FILE] COMMAND...    Append COMMAND's output, then graph
    """
    config = _make_config(data_file, command, minimum, maximum, points, no_rotate,
                          no_newline, theme, renderer, json_output, verbose)
    setup_logging(config.verbose)
    logger.debug("config: %s", config)

    from sparkgraph.commands.graph import run_graph
    try:
        run_graph(config)
    except (OSError, SamplerError) as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)
