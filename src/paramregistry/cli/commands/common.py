"""Helpers shared by the schema commands."""

import logging
from enum import Enum
from pathlib import Path

import click

from paramregistry.core import Registry
from paramregistry.exceptions import ErrorContext, format_error_for_display
from paramregistry.schema import RegistrySchema, build_registry

logger = logging.getLogger(__name__)

schema_argument = click.argument(
    "schema_path", metavar="SCHEMA", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
properties_option = click.option(
    "--properties",
    "-p",
    "properties_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Properties file to load (schema must allow from_file)",
)
tokens_argument = click.argument("tokens", nargs=-1, type=click.UNPROCESSED)


def load_registry(
    schema_path: Path, properties_path: Path | None, tokens: tuple[str, ...]
) -> Registry[Enum]:
    """
    Build a registry from a schema and run every load the schema allows.

    A source the schema allows but the caller did not supply is loaded as
    empty, so ordering and completeness rules still apply.

    Raises:
        ParamRegistryError: If any step fails
    """
    schema = RegistrySchema.from_json_file(schema_path)

    with ErrorContext(f"build registry from {schema_path}", logger_instance=logger):
        registry = build_registry(schema)

    if properties_path is not None or registry.sources.file:
        with ErrorContext("load properties", logger_instance=logger):
            registry.load_from_file(properties_path if properties_path is not None else {})

    if tokens or registry.sources.cmdline:
        with ErrorContext("load command-line tokens", logger_instance=logger):
            registry.load_from_args(list(tokens))

    return registry


def echo_error(error: Exception) -> None:
    """Print a formatted error and its hint to stderr."""
    message, hint = format_error_for_display(error)
    click.echo(f"Error: {message}", err=True)
    if hint:
        click.echo(f"Hint: {hint}", err=True)
