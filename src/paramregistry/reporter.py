"""Text and JSON rendering of registry dumps."""

import json
from collections.abc import Iterable

from paramregistry.models import ParameterReport


def render_report(reports: Iterable[ParameterReport]) -> list[str]:
    """
    Format one line per parameter.

    Example:
        ```
            PORT='8080', REQUIRED, FILE, STATIC
            DEBUG='False', OPTIONAL, COMMAND_LINE, DYNAMIC
        ```
    """
    lines = []
    for report in reports:
        value = "null" if report.value is None else report.value
        lines.append(
            f"    {report.key}='{value}', {report.importance.name}, "
            f"{report.source.name}, {report.settable.name}"
        )
    return lines


def render_json(reports: Iterable[ParameterReport], indent: int = 2) -> str:
    """Serialize reports as a JSON array."""
    return json.dumps([report.model_dump(mode="json") for report in reports], indent=indent)
