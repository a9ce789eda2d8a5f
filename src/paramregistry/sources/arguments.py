"""Command-line token adapter.

Tokens are consumed in strict pairs: ``-name value``. Every name consumes the
next token as its value, so booleans are written ``-debug false`` rather than
as bare flags.
"""

from collections.abc import Container, Iterator, Sequence

from paramregistry.exceptions import ArgumentError, ParameterLookupError

DEFAULT_MARKER = "-"


def iter_argument_pairs(
    tokens: Sequence[str],
    known_names: Container[str],
    marker: str = DEFAULT_MARKER,
) -> Iterator[tuple[str, str]]:
    """
    Yield ``(external_name, raw_value)`` pairs from command-line tokens.

    Pairs are produced lazily, so a caller applying them one at a time keeps
    everything before the first malformed pair.

    - Blank tokens, and a name token that is only the marker, are skipped.
    - Name tokens are trimmed; value tokens are passed through untouched so
      the validator can reject padding.

    Args:
        tokens: Ordered tokens, e.g. ``sys.argv[1:]``
        known_names: Declared external names
        marker: Prefix identifying a name token

    Raises:
        ArgumentError: If a name token lacks the marker or has no value token
        ParameterLookupError: If a name matches no declared parameter
    """
    if not marker:
        raise ArgumentError("Marker must not be empty")

    index = 0
    count = len(tokens)
    while index < count:
        token = tokens[index].strip()
        index += 1
        if not token:
            continue
        if not token.startswith(marker):
            raise ArgumentError(f"Parameter: {token} must start with '{marker}'", token=token)

        name = token[len(marker):]
        if not name:
            continue
        if name not in known_names:
            raise ParameterLookupError(f"Unknown parameter: {name}", key=name)
        if index == count:
            raise ArgumentError(f"Missing value for: {name}", token=token)

        yield name, tokens[index]
        index += 1
