"""Adapters turning external inputs into raw strings for the registry."""

from .arguments import DEFAULT_MARKER, iter_argument_pairs
from .properties import PropertiesFile

__all__ = ["DEFAULT_MARKER", "PropertiesFile", "iter_argument_pairs"]
