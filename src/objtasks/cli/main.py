"""objtasks CLI entry point: Click group with subcommands."""

import dataclasses
import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objtasks - CSS selector builder, rectangle and JSON helpers."""
    config = ObjtasksConfig()
    if verbose:
        config = dataclasses.replace(config, log_level="DEBUG")
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.selector import build, check  # noqa: E402
from objtasks.cli.rect import area, from_json_cmd, to_json_cmd  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(area)
cli.add_command(to_json_cmd)
cli.add_command(from_json_cmd)
