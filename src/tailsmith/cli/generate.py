"""CLI command: tailsmith generate -- emit CSS for a set of classes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailsmith.cli.common import build_generator, read_classes


@click.command()
@click.argument("classes", nargs=-1)
@click.option(
    "--input", "-i", "input_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read whitespace-separated classes from a file",
)
@click.option(
    "--config", "-c", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
@click.option("--minify", is_flag=True, help="Emit compact single-line CSS")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS to a file instead of stdout",
)
@click.option("--strict", is_flag=True, help="Exit with code 1 if any class fails")
@click.option("--verbose", "-v", is_flag=True, help="Log generation events to stderr")
def generate(
    classes: tuple[str, ...],
    input_file: str | None,
    config_file: str | None,
    minify: bool,
    output: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Generate CSS for utility CLASSES.

    Classes that cannot be resolved are reported on stderr and left out of
    the stylesheet.
    """
    class_names = read_classes(classes, input_file)
    generator = build_generator(config_file, verbose=verbose)

    result = generator.generate(class_names, minify=True if minify else None)

    for raw, outcome in result.failures.items():
        click.echo(f"Skipped {raw}: {outcome.reason}", err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(
            f"Wrote {len(result.succeeded)} class(es) to {output}", err=True
        )
    else:
        click.echo(result.css, nl=False)

    if strict and result.failures:
        sys.exit(1)
