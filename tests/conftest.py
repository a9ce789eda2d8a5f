"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from paramregistry import AllowedSource, Registry

from helpers import ALL_SOURCES, Options, declare_options


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_properties(temp_dir):
    """Write properties text to a file and return its path."""

    def _write(text: str, name: str = "app.properties") -> Path:
        path = temp_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def empty_registry():
    """Registry allowing every source, nothing declared yet."""
    return Registry(Options, *ALL_SOURCES)


@pytest.fixture
def registry(empty_registry):
    """Registry allowing every source with all Options declared (INITIALIZED)."""
    declare_options(empty_registry)
    return empty_registry


@pytest.fixture
def cmdline_registry():
    """Registry allowing command line and dynamic writes, but not files."""
    registry = Registry(Options, AllowedSource.FROM_CMDLINE, AllowedSource.DYNAMIC)
    declare_options(registry)
    return registry
