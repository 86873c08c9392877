"""Tailsmith CLI entry point: Click group with subcommands."""

import click

from tailsmith import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tailsmith")
def cli() -> None:
    """Tailsmith - turn utility classes into CSS."""


# Import and register subcommands
from tailsmith.cli.generate import generate  # noqa: E402
from tailsmith.cli.validate import validate  # noqa: E402
from tailsmith.cli.inspect import inspect  # noqa: E402

cli.add_command(generate)
cli.add_command(validate)
cli.add_command(inspect)
