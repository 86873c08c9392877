"""CLI command: tailsmith inspect -- show each pipeline stage for one class."""

from __future__ import annotations

import sys

import click

from tailsmith.cli.common import build_generator
from tailsmith.errors import GenerationError
from tailsmith.variants.combinator import combine


@click.command()
@click.argument("class_name")
@click.option(
    "--config", "-c", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration file",
)
def inspect(class_name: str, config_file: str | None) -> None:
    """Show how CLASS_NAME is split, resolved and combined."""
    generator = build_generator(config_file)

    try:
        parsed = generator.parse_class(class_name)
    except GenerationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rule = combine(class_name, parsed.variants, parsed.properties)

    click.echo(f"Class:       {class_name}")
    variants = ", ".join(str(tag) for tag in parsed.variants) or "-"
    click.echo(f"Variants:    {variants}")
    click.echo(f"Base token:  {parsed.token.text}")
    click.echo(f"Important:   {'yes' if parsed.token.important else 'no'}")
    click.echo(f"Prefix:      {parsed.token.prefix}")
    click.echo(f"Selector:    {rule.selector}")
    click.echo(f"At-rule:     {rule.media_query or '-'}")
    click.echo(f"Specificity: {rule.specificity}")
    click.echo(f"Valid:       {'yes' if rule.valid else 'no'}")
    click.echo()

    click.echo("Properties:")
    for prop in rule.properties:
        click.echo(f"  {prop.to_css()};")

    if rule.errors:
        click.echo()
        click.echo("Diagnostics:")
        for diag in rule.errors:
            click.echo(f"  {diag}")

    if not rule.valid:
        sys.exit(1)
