import json
import sys
from abc import ABC, abstractmethod
from dataclasses import fields, is_dataclass
from typing import Any, List, Optional, TextIO

from utils.slack.models import SearchResult
from utils.slack.pagination import PaginatedResult

OUTPUT_FORMATS = ("json", "table")
NO_ITEMS_MESSAGE = "No items found."


def to_serializable(data: Any) -> Any:
    """Convert records, paginated results and containers into plain JSON values."""
    if hasattr(data, "to_dict") and callable(data.to_dict):
        return data.to_dict()
    if isinstance(data, dict):
        return {str(key): to_serializable(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_serializable(item) for item in data]
    return data


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(_format_value(item) for item in value)
    if is_dataclass(value) or isinstance(value, dict):
        return json.dumps(to_serializable(value), ensure_ascii=False)
    return str(value)


class Formatter(ABC):
    """Renders command results to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    @abstractmethod
    def render(self, data: Any) -> None:
        pass


class JSONFormatter(Formatter):
    def render(self, data: Any) -> None:
        self.stream.write(json.dumps(to_serializable(data), indent=2, ensure_ascii=False))
        self.stream.write("\n")


class TableFormatter(Formatter):
    """
    Plain-text tables.

    Mappings and single records render as FIELD/VALUE rows; lists of records render with
    one column per record field. Paginated and search results append their footer.
    """

    def render(self, data: Any) -> None:
        if isinstance(data, PaginatedResult):
            self._render_rows(data.items)
            if data.has_more:
                self.stream.write(f"\nMore results available. Next cursor: {data.next_cursor}\n")
        elif isinstance(data, SearchResult):
            self._render_rows(data.matches)
            self.stream.write(f"\nTotal: {data.total}\n")
        elif isinstance(data, dict):
            self._write_table(["FIELD", "VALUE"], [[str(k), _format_value(data[k])] for k in sorted(data)])
        elif is_dataclass(data):
            rows = [[f.name, _format_value(getattr(data, f.name))] for f in fields(data)]
            self._write_table(["FIELD", "VALUE"], rows)
        elif isinstance(data, (list, tuple)):
            self._render_rows(data)
        else:
            JSONFormatter(self.stream).render(data)

    def _render_rows(self, items) -> None:
        items = list(items)
        if not items:
            self.stream.write(f"{NO_ITEMS_MESSAGE}\n")
            return

        first = items[0]
        if is_dataclass(first):
            headers = [f.name for f in fields(first)]
            rows = [[_format_value(getattr(item, name)) for name in headers] for item in items]
        elif isinstance(first, dict):
            headers = list(first.keys())
            rows = [[_format_value(item.get(name)) for name in headers] for item in items]
        else:
            JSONFormatter(self.stream).render(items)
            return

        self._write_table([header.upper() for header in headers], rows)

    def _write_table(self, headers: List[str], rows: List[List[str]]) -> None:
        widths = [len(header) for header in headers]
        for row in rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], len(cell))

        def line(cells: List[str]) -> str:
            return "  ".join(cell.ljust(widths[index]) for index, cell in enumerate(cells)).rstrip()

        self.stream.write(line(headers) + "\n")
        self.stream.write(line(["-" * width for width in widths]) + "\n")
        for row in rows:
            self.stream.write(line(row) + "\n")


class OutputManager:
    """Picks the formatter for a run."""

    @staticmethod
    def get_formatter(output_format: Optional[str] = None, stream: Optional[TextIO] = None) -> Formatter:
        """
        Returns the formatter for ``output_format``.

        Args:
            output_format (Optional[str]): 'json', 'table' or None for auto-detection.
            stream (Optional[TextIO]): Destination stream. Defaults to stdout.

        Returns:
            Formatter: Table output on a terminal, JSON otherwise, unless a format is given.

        Raises:
            ValueError: If ``output_format`` is not a known format.
        """
        stream = stream or sys.stdout
        if output_format is None:
            isatty = getattr(stream, "isatty", None)
            output_format = "table" if isatty and isatty() else "json"
        if output_format == "json":
            return JSONFormatter(stream)
        if output_format == "table":
            return TableFormatter(stream)
        raise ValueError(f"Invalid output format: {output_format}. Must be one of {', '.join(OUTPUT_FORMATS)}.")
