"""Properties file adapter.

Reads flat ``key=value`` (or ``key: value``) text into a read-only string
mapping. Parsing is delegated to ``configparser`` under a synthetic section:

- ``#``, ``!`` and ``;`` start comment lines
- keys keep their letter case
- ``%`` has no special meaning (interpolation disabled)
- repeated keys keep the last value
- any ``[section]`` header lines are flattened into the same mapping

Surrounding whitespace of values is stripped by the parser.

This is not the full Java properties syntax. Differences to expect:

- an indented line continues the value of the entry above it, so
  ``host=a`` followed by ``  port=1`` yields a two-line ``host`` value
  and no ``port`` entry; a trailing backslash is kept literally
- whitespace is not a delimiter: ``port 8080`` is rejected with
  ``PropertiesFileError``, as is a bare ``port`` line with no value
- unicode and other backslash escapes are not decoded
"""

import configparser
import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from paramregistry.exceptions import PropertiesFileError

logger = logging.getLogger(__name__)

_SECTION = "properties"


class PropertiesFile(Mapping[str, str]):
    """
    Read-only key/value view of a properties file.

    Example:
        ```python
        props = PropertiesFile.read("app.properties")
        props.get("port")  # "8080" or None
        ```
    """

    def __init__(self, entries: Mapping[str, str], path: Path | None = None) -> None:
        self._entries = dict(entries)
        self.path = path

    @classmethod
    def parse(cls, text: str, path: Path | None = None) -> "PropertiesFile":
        """
        Parse properties text.

        Args:
            text: File contents
            path: Where the text came from, for error messages

        Raises:
            PropertiesFileError: If a line is neither a comment nor an entry
        """
        parser = configparser.ConfigParser(
            delimiters=("=", ":"),
            comment_prefixes=("#", "!", ";"),
            inline_comment_prefixes=None,
            strict=False,
            interpolation=None,
            default_section="__defaults__",
        )
        parser.optionxform = str  # type: ignore[method-assign,assignment]
        try:
            parser.read_string(f"[{_SECTION}]\n{text}", source=str(path or "<string>"))
        except configparser.Error as e:
            raise PropertiesFileError(str(path or "<string>"), str(e).splitlines()[0]) from e

        entries: dict[str, str] = {}
        for section in parser.sections():
            for key, value in parser.items(section):
                entries[key] = value
        return cls(entries, path)

    @classmethod
    def read(cls, path: str | os.PathLike[str] | None) -> "PropertiesFile":
        """
        Read and parse a properties file.

        Args:
            path: File to read

        Raises:
            PropertiesFileError: If the path is blank, the file does not exist,
                cannot be read, or cannot be parsed
        """
        if path is None:
            raise PropertiesFileError("<none>", "file name is null")
        name = os.fspath(path).strip()
        if not name:
            raise PropertiesFileError(repr(os.fspath(path)), "file name is blank")

        file_path = Path(name)
        if not file_path.exists():
            raise PropertiesFileError(name, "file does not exist")
        if not file_path.is_file():
            raise PropertiesFileError(name, "not a regular file")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PropertiesFileError(name, f"file not readable: {e}") from e

        props = cls.parse(text, file_path)
        logger.debug(f"Read {len(props)} properties from {file_path}")
        return props

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PropertiesFile(path={self.path!s}, entries={len(self._entries)})"
