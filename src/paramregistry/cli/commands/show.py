"""Show command: load a schema and print every parameter."""

import sys
from pathlib import Path

import click

from paramregistry.exceptions import ParamRegistryError
from paramregistry.reporter import render_json, render_report

from .common import echo_error, load_registry, properties_option, schema_argument, tokens_argument


@click.command(name="show")
@schema_argument
@properties_option
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@tokens_argument
def show(schema_path: Path, properties_path: Path | None, as_json: bool, tokens: tuple[str, ...]):
    """Load SCHEMA, apply the properties file and TOKENS, print the parameters.

    Put '--' before TOKENS so they are not read as options:

    \b
      paramregistry show schema.json -p app.properties -- -port 8080
    """
    try:
        registry = load_registry(schema_path, properties_path, tokens)
        reports = registry.dump()
    except ParamRegistryError as e:
        echo_error(e)
        sys.exit(1)

    if as_json:
        click.echo(render_json(reports))
        return

    click.echo(f"\n{registry.key_type.__name__} ({registry.state.name}):")
    click.echo("=" * 60)
    for line in render_report(reports):
        click.echo(line)
    click.echo("")
