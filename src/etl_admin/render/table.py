# src/etl_admin/render/table.py

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from . import html

T = TypeVar("T")

DEFAULT_TABLE_CLASS = "generaltable admintable"


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    header: str


@dataclass(frozen=True, slots=True)
class Row:
    cells: Sequence[str]  # markup, already escaped
    css_class: str = ""


class TableIdSequence:
    """
    Per-context id generator for tables rendered on the same page.

    Lives on the application state, so ids restart with every new context.
    """

    def __init__(self, prefix: str, start: int = 0) -> None:
        self.prefix = prefix
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self.prefix}{value}"


class TableRenderer(Generic[T]):
    """
    Generic header + rows table.

    Configured with a column spec; rows come from a caller-supplied callback.
    All rows are built before any markup is joined, so a failing row never
    yields a partial table.
    """

    def __init__(
        self,
        table_id: str,
        columns: Sequence[Column],
        *,
        attrs: dict[str, str] | None = None,
    ) -> None:
        if not columns:
            raise ValueError("A table needs at least one column")
        self.table_id = table_id
        self.columns = list(columns)
        self.attrs = {"class": DEFAULT_TABLE_CLASS, **(attrs or {})}

    def render(self, items: Iterable[T], build_row: Callable[[T], Row]) -> str:
        rows = [build_row(item) for item in items]
        for row in rows:
            if len(row.cells) != len(self.columns):
                raise ValueError(
                    f"Row has {len(row.cells)} cells, table {self.table_id!r} has {len(self.columns)} columns"
                )

        out = [html.start_tag("table", {"id": self.table_id, **self.attrs})]
        out.append(self._render_header())
        out.append(html.start_tag("tbody"))
        for idx, row in enumerate(rows):
            out.append(self._render_row(idx, row))
        out.append(html.end_tag("tbody"))
        out.append(html.end_tag("table"))
        return "\n".join(out)

    def _render_header(self) -> str:
        cells = "".join(
            html.tag("th", html.text(col.header), {"class": f"header c{i} {col.name}", "scope": "col"})
            for i, col in enumerate(self.columns)
        )
        return html.tag("thead", html.tag("tr", cells))

    def _render_row(self, idx: int, row: Row) -> str:
        css = f"r{idx % 2}"
        if row.css_class:
            css = f"{css} {row.css_class}"
        cells = "".join(
            html.tag("td", cell, {"class": f"cell c{i} {col.name}"})
            for i, (col, cell) in enumerate(zip(self.columns, row.cells))
        )
        return html.tag("tr", cells, {"class": css})
