"""Check command: verify a schema, properties file and tokens load cleanly."""

import sys
from pathlib import Path

import click

from paramregistry.exceptions import ParamRegistryError

from .common import echo_error, load_registry, properties_option, schema_argument, tokens_argument

CHECK = "[OK]"
CROSS = "[FAIL]"


@click.command(name="check")
@schema_argument
@properties_option
@tokens_argument
def check(schema_path: Path, properties_path: Path | None, tokens: tuple[str, ...]):
    """Validate SCHEMA with its properties file and TOKENS.

    Exits with status 1 if any value is invalid or a required
    parameter is missing.
    """
    try:
        registry = load_registry(schema_path, properties_path, tokens)
        registry.check_required()
    except ParamRegistryError as e:
        click.echo(f"{CROSS} Configuration is invalid", err=True)
        echo_error(e)
        sys.exit(1)

    click.echo(f"{CHECK} Configuration is valid")
    click.echo(f"  Schema: {schema_path}")
    if properties_path is not None:
        click.echo(f"  Properties: {properties_path}")
    click.echo(f"  Parameters: {len(registry)}")
