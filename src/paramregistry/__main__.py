"""Main entry point for ``python -m paramregistry``."""

from paramregistry.cli import cli

if __name__ == "__main__":
    cli()
