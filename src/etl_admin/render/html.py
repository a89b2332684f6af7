# src/etl_admin/render/html.py

"""
Tiny markup writer.

Text content and attribute values are always escaped. Helpers that take
`content` expect already-built markup (the output of other helpers or of
`text()`), so callers escape exactly once.
"""

from __future__ import annotations

from collections.abc import Mapping
from html import escape

Attrs = Mapping[str, object] | None


def text(value: object) -> str:
    return escape(str(value), quote=False)


def attributes(attrs: Attrs) -> str:
    if not attrs:
        return ""
    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def start_tag(name: str, attrs: Attrs = None) -> str:
    return f"<{name}{attributes(attrs)}>"


def end_tag(name: str) -> str:
    return f"</{name}>"


def empty_tag(name: str, attrs: Attrs = None) -> str:
    return f"<{name}{attributes(attrs)} />"


def tag(name: str, content: str, attrs: Attrs = None) -> str:
    return start_tag(name, attrs) + content + end_tag(name)


def div(content: str, attrs: Attrs = None) -> str:
    return tag("div", content, attrs)


def link(href: str, content: str, attrs: Attrs = None) -> str:
    return tag("a", content, {"href": href, **(attrs or {})})
