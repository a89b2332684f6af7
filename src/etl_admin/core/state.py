# src/etl_admin/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..render.table import TableIdSequence
from .ports import DateFormatter, IconResolver, Translator, UrlBuilder


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: Any

    strings: Translator
    icons: IconResolver
    urls: UrlBuilder
    dates: DateFormatter

    # Context-scoped generator for table instance ids.
    table_ids: TableIdSequence
