# src/etl_admin/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires concrete collaborators (strings, icons, URLs, dates) into AppState,
- builds task table renderers with explicit or context-generated ids.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..config import get_settings
from ..core.ports import TaskSource
from ..core.state import AppState
from ..i18n import StringCatalog, UserDateFormatter, resolve_timezone
from ..icons import PixIconResolver
from ..render.table import TableIdSequence
from ..render.task_table import TaskTableRenderer, utc_now
from ..tasks.task_source import JsonTaskSource
from ..urls import AdminUrlBuilder

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if settings.strings_path is not None:
        strings = StringCatalog.from_file(settings.strings_path, lang=settings.lang)
    else:
        strings = StringCatalog(lang=settings.lang)

    state = AppState(
        settings=settings,
        strings=strings,
        icons=PixIconResolver(settings.pix_base_url),
        urls=AdminUrlBuilder(
            settings.admin_base_url,
            legacy_history_param=settings.legacy_history_param,
        ),
        dates=UserDateFormatter(resolve_timezone(settings.timezone), settings.date_format),
        table_ids=TableIdSequence(settings.table_id_prefix),
    )
    logger.debug(
        "State ready lang=%s tz=%s base_url=%s",
        settings.lang,
        settings.timezone,
        settings.admin_base_url,
    )
    return state


def build_task_table(
    state: AppState,
    *,
    table_id: str | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> TaskTableRenderer:
    if table_id is None:
        table_id = state.table_ids.next_id()

    return TaskTableRenderer(
        table_id=table_id,
        strings=state.strings,
        icons=state.icons,
        urls=state.urls,
        dates=state.dates,
        clock=clock,
    )


def open_task_source(state: AppState, path: str | Path) -> TaskSource:
    """JSON task file; naive timestamps are read in the configured timezone."""
    return JsonTaskSource(path, default_tz=resolve_timezone(state.settings.timezone))
