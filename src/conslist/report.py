"""Query reports over a persistent list.

A report runs the list's read operations and renders one line per query.
The queries can be loaded from a YAML configuration file:

    values: [1, 2, 3, 4, 5]
    get: [0, 2, 10]
    skip: [2, 10]
    contains: [3, 6]
    trace: false
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from typing import TextIO

    from conslist.core import PersistentList


@dataclass
class ReportConfig:
    """Configuration for a list report.

    Attributes:
        values: List elements, front to back.
        get: Indices to look up with ``get()``.
        skip: Counts to advance with ``skip()``.
        contains: Values to look for with ``contains()``.
        trace: Whether to trace iterator advances.
    """

    values: list[Any]
    get: list[int] = field(default_factory=list)
    skip: list[int] = field(default_factory=list)
    contains: list[Any] = field(default_factory=list)
    trace: bool = False


def _sequence(data: dict[str, Any], key: str) -> list[Any]:
    items = data.get(key, [])
    if items is None:
        return []
    if not isinstance(items, list):
        msg = f"'{key}' must be a sequence"
        raise ValueError(msg)
    return items


def _int_list(data: dict[str, Any], key: str) -> list[int]:
    items = _sequence(data, key)
    for item in items:
        # bool is an int subclass but never a valid index
        if not isinstance(item, int) or isinstance(item, bool):
            msg = f"'{key}' entries must be integers, got {item!r}"
            raise ValueError(msg)
    return list(items)


def parse_report_config(data: Any) -> ReportConfig:
    """Validate decoded YAML data and build a ReportConfig.

    Raises:
        ValueError: If the data does not describe a report.
    """
    if not isinstance(data, dict):
        msg = "report configuration must be a mapping"
        raise ValueError(msg)

    values = data.get("values")
    if not isinstance(values, list):
        msg = "'values' is required and must be a sequence"
        raise ValueError(msg)

    trace = data.get("trace", False)
    if not isinstance(trace, bool):
        msg = f"'trace' must be true or false, got {trace!r}"
        raise ValueError(msg)

    return ReportConfig(
        values=values,
        get=_int_list(data, "get"),
        skip=_int_list(data, "skip"),
        contains=_sequence(data, "contains"),
        trace=trace,
    )


def load_report_config(config_path: Path | str) -> ReportConfig:
    """Load a report configuration from YAML.

    Args:
        config_path: Path to the YAML file.

    Returns:
        ReportConfig with validated queries.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f)
    return parse_report_config(data)


def parse_value(text: str) -> Any:
    """Parse a command-line value as a YAML scalar.

    Resolution follows YAML 1.1 as implemented by PyYAML: "3" -> 3,
    "a" -> "a", "yes" -> True, "010" -> 8 (octal). Quote a value
    (e.g. "'010'") to keep it a string.

    Raises:
        ValueError: If the text is a mapping or sequence, not a scalar.
    """
    if not text.strip():
        return text
    value = yaml.safe_load(text)
    if isinstance(value, (dict, list)):
        msg = f"expected a scalar value, got {text!r}"
        raise ValueError(msg)
    return value


def build_report(
    lst: PersistentList[Any],
    config: ReportConfig,
    trace: TextIO | None = None,
) -> list[str]:
    """Run the configured queries against a list.

    Args:
        lst: List to query.
        config: Queries to run.
        trace: Stream for iterator trace lines, used when ``config.trace``
            is set. Every traversing query writes to it.

    Returns:
        One ``query = result`` line per query.
    """
    stream = trace if config.trace else None

    lines = [
        f"list = {list(lst.iter(trace=stream))!r}",
        f"len = {lst.length(trace=stream)}",
        f"is_empty = {lst.is_empty()!r}",
        f"front = {lst.front()!r}",
        f"back = {lst.back()!r}",
        f"last = {lst.last(trace=stream)!r}",
        f"tail = {lst.tail()!r}",
    ]
    lines.extend(f"get({i}) = {lst.get(i)!r}" for i in config.get)
    lines.extend(f"skip({n}) = {lst.skip(n)!r}" for n in config.skip)
    lines.extend(
        f"contains({v!r}) = {lst.contains(v, trace=stream)!r}" for v in config.contains
    )
    return lines


def format_report(lines: list[str]) -> str:
    """Frame report lines with a header."""
    rule = "=" * 60
    return "\n".join([rule, "REPORT", rule, *lines, rule])
