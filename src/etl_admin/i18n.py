# src/etl_admin/i18n.py

"""
Localization: a component-scoped string catalog and a viewer date formatter.

Strings are looked up by (key, component). "core" holds generic UI words,
"tool_etl" holds strings owned by the ETL admin tool. The catalog tries the
configured language first and falls back to English; a key missing from
both raises MissingStringError instead of rendering a placeholder.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

FALLBACK_LANG = "en"

Catalog = dict[str, dict[str, dict[str, str]]]  # lang -> component -> key -> text

BUILTIN_STRINGS: Catalog = {
    "en": {
        "core": {
            "actions": "Actions",
            "yes": "Yes",
            "no": "No",
            "enable": "Enable",
            "disable": "Disable",
            "edit": "Edit",
            "delete": "Delete",
        },
        "tool_etl": {
            "source": "Source",
            "target": "Target",
            "processor": "Processor",
            "schedule": "Schedule",
            "enabled": "Enabled",
            "viewhistory": "View history",
        },
    },
}


class MissingStringError(LookupError):
    def __init__(self, key: str, component: str, lang: str) -> None:
        super().__init__(f"Missing string [{key},{component}] for language {lang!r}")
        self.key = key
        self.component = component
        self.lang = lang


class StringCatalog:
    """In-memory catalog seeded from BUILTIN_STRINGS plus optional overrides."""

    def __init__(
        self,
        lang: str = FALLBACK_LANG,
        overrides: Mapping[str, Mapping[str, Mapping[str, str]]] | None = None,
    ) -> None:
        self.lang = (lang or FALLBACK_LANG).lower()
        self._strings: Catalog = {
            lng: {comp: dict(keys) for comp, keys in comps.items()}
            for lng, comps in BUILTIN_STRINGS.items()
        }
        if overrides:
            self.merge(overrides)

    @classmethod
    def from_file(cls, path: str | Path, *, lang: str = FALLBACK_LANG) -> StringCatalog:
        p = Path(path)
        data = json.loads(p.read_text("utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"String file must contain an object: {p}")
        catalog = cls(lang=lang, overrides=data)
        logger.info("Loaded string overrides from %s (lang=%s)", p, catalog.lang)
        return catalog

    def merge(self, overrides: Mapping[str, Mapping[str, Mapping[str, str]]]) -> None:
        for lng, comps in overrides.items():
            if not isinstance(comps, Mapping):
                raise ValueError(f"Strings for language {lng!r} must be an object")
            target = self._strings.setdefault(str(lng).lower(), {})
            for comp, keys in comps.items():
                if not isinstance(keys, Mapping):
                    raise ValueError(f"Strings for component {comp!r} must be an object")
                target.setdefault(str(comp), {}).update({str(k): str(v) for k, v in keys.items()})

    def get_string(self, key: str, component: str = "core") -> str:
        for lng in (self.lang, FALLBACK_LANG):
            text = self._strings.get(lng, {}).get(component, {}).get(key)
            if text is not None:
                return text
        raise MissingStringError(key, component, self.lang)


def resolve_timezone(name: str) -> tzinfo:
    if not name or name.upper() in {"UTC", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {name!r}") from None


class UserDateFormatter:
    """Render aware timestamps in the viewer's timezone with a strftime pattern."""

    def __init__(self, tz: tzinfo, fmt: str) -> None:
        self.tz = tz
        self.fmt = fmt

    def format(self, value: datetime) -> str:
        if value.tzinfo is None:
            raise ValueError("Cannot localize a naive datetime")
        return value.astimezone(self.tz).strftime(self.fmt)
