"""Rendering of mesh objects as tables, YAML or JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Sequence, TextIO

import yaml

from emctl.meta import MeshResource, TableColumn, TableObject

__all__ = [
    "UnsupportedFormatError",
    "Printer",
    "render_table",
    "render_yaml",
    "render_json",
]

NO_RESOURCE = "No resource\n"


class UnsupportedFormatError(ValueError):
    """Raised when an output format is not table, json or yaml."""


def _header_title(name: str) -> str:
    return name.replace("_", " ").replace(".", " ").strip().upper()


def _columns(obj: MeshResource) -> list[TableColumn]:
    if isinstance(obj, TableObject):
        return list(obj.columns() or [])
    return []


def render_table(objects: Sequence[MeshResource]) -> str:
    """Render objects as a borderless, left-aligned table.

    The extra columns come from the first object that defines its own.
    """
    header = ["Kind", "Name", "Labels"]
    header_columns = next(
        (obj.columns() or [] for obj in objects if isinstance(obj, TableObject)), []
    )
    header.extend(column.name for column in header_columns)

    rows: list[list[str]] = []
    for obj in objects:
        labels = sorted(f"{key}={value}" for key, value in (obj.labels or {}).items())
        row = [obj.kind, obj.name, ",".join(labels)]
        row.extend(column.value for column in _columns(obj))
        rows.append(row)

    width = max(len(header), *(len(row) for row in rows))
    titles = [_header_title(name) for name in header] + [""] * (width - len(header))
    rows = [row + [""] * (width - len(row)) for row in rows]

    widths = [
        max(len(cell) for cell in column) for column in zip(titles, *rows)
    ]

    def line(cells: Sequence[str]) -> str:
        return "".join(f" {cell.ljust(size)} " for cell, size in zip(cells, widths)).rstrip()

    return "\n".join(line(cells) for cells in [titles, *rows]) + "\n"


def _documents(objects: Sequence[MeshResource]) -> list[dict[str, Any]]:
    return [obj.to_dict() for obj in objects]


def render_yaml(objects: Sequence[MeshResource]) -> str:
    """Render objects as a YAML list."""
    return yaml.safe_dump(
        _documents(objects),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def render_json(objects: Sequence[MeshResource]) -> str:
    """Render objects as an indented JSON array."""
    return json.dumps(_documents(objects), indent=2, ensure_ascii=False) + "\n"


_RENDERERS = {
    "table": render_table,
    "json": render_json,
    "yaml": render_yaml,
}


@dataclass
class Printer:
    """Prints mesh objects in one output format."""

    output_format: str = "table"
    stream: TextIO | None = None

    def render(self, objects: Sequence[MeshResource]) -> str:
        """Return the text printed for objects.

        Raises UnsupportedFormatError for an unknown format when there is
        anything to print.
        """
        if not objects:
            return NO_RESOURCE
        renderer = _RENDERERS.get(self.output_format)
        if renderer is None:
            raise UnsupportedFormatError(f"unsupported output format: {self.output_format}")
        return renderer(objects)

    def print_objects(self, objects: Sequence[MeshResource]) -> None:
        """Write the rendered objects to the stream, standard output by default."""
        text = self.render(objects)
        (self.stream or sys.stdout).write(text)