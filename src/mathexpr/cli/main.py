"""mathexpr CLI entry point."""

import logging
import os

import click


@click.group()
def cli():
    """mathexpr: arithmetic expression engine CLI."""
    logging.basicConfig(
        level=os.environ.get("MATHEXPR_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from mathexpr.cli.expr_cmd import batch, check, evaluate  # noqa: E402

cli.add_command(evaluate)
cli.add_command(check)
cli.add_command(batch)
