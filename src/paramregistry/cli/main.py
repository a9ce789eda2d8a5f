"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from paramregistry import __version__

from .commands import check, show

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command-line tool.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Also log to this file (optional)
        log_level: Log level for the file (DEBUG/INFO/WARNING/ERROR)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()

    # Replace handlers from an earlier invocation in the same process
    for handler in list(root_logger.handlers):
        if getattr(handler, "_paramregistry_cli", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._paramregistry_cli = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file:
        file_level = getattr(logging, log_level.upper())
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        file_handler._paramregistry_cli = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)
        level = min(level, file_level)

    root_logger.setLevel(level)
    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="paramregistry")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for the log file (default: INFO)'
)
def cli(verbose: int, log_file: Optional[Path], log_level: str):
    """
    paramregistry - typed, validated configuration parameters.

    Declare parameters in a JSON schema, then load values from a
    properties file and command-line tokens.

    \b
    Examples:
      # Print every parameter after loading
      paramregistry show schema.json -p app.properties -- -port 8080

      # Same, as JSON
      paramregistry show schema.json --json

      # Fail (exit 1) if a value is invalid or a required one is missing
      paramregistry check schema.json -p app.properties
    """
    setup_logging(verbose, log_file, log_level)


cli.add_command(show)
cli.add_command(check)

if __name__ == "__main__":
    cli()
