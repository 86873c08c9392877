"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tailsmith.config import GeneratorConfig, load_config
from tailsmith.engine.generator import Generator, split_class_list
from tailsmith.errors import ConfigError
from tailsmith.events.bus import EventBus
from tailsmith.events.log import logging_listener
from tailsmith.events.types import GenerationEvent


def read_classes(classes: tuple[str, ...], input_file: str | None) -> list[str]:
    """Collect class names from arguments and an optional whitespace-separated file."""
    collected: list[str] = []
    for arg in classes:
        collected.extend(split_class_list(arg))
    if input_file:
        text = Path(input_file).read_text(encoding="utf-8")
        collected.extend(split_class_list(text))
    if not collected:
        raise click.UsageError("No classes given. Pass them as arguments or with --input.")
    return collected


def build_generator(config_file: str | None, verbose: bool = False) -> Generator:
    """Load the config (if any) and build a generator, exiting on config errors."""
    event_bus = EventBus()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
        event_bus.subscribe(GenerationEvent, logging_listener())
    try:
        config = load_config(config_file) if config_file else GeneratorConfig()
        return Generator(config, event_bus=event_bus)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
