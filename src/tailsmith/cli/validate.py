"""CLI command: tailsmith validate -- check classes without emitting CSS."""

from __future__ import annotations

import sys

import click

from tailsmith.cli.common import build_generator, read_classes
from tailsmith.errors import GenerationError
from tailsmith.model.diagnostic import Diagnostic, Severity


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
def validate(classes: tuple[str, ...], input_file: str | None, config_file: str | None) -> None:
    """Check utility CLASSES and report diagnostics.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    """
    class_names = list(dict.fromkeys(read_classes(classes, input_file)))
    generator = build_generator(config_file)

    diagnostics: list[Diagnostic] = []
    for raw in class_names:
        try:
            rule = generator.build_rule(raw)
        except GenerationError as exc:
            diagnostics.append(
                Diagnostic(
                    rule=exc.kind.value,
                    severity=Severity.ERROR,
                    message=exc.message,
                    class_name=raw,
                )
            )
            continue
        diagnostics.extend(rule.errors)

    if not diagnostics:
        click.echo(f"OK: {len(class_names)} class(es) valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(diag.summary())

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
