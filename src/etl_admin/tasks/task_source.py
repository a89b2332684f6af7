# src/etl_admin/tasks/task_source.py

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any

from .task_models import EtlTask, InvalidTaskError, ItemKind, Schedule, build_item

logger = logging.getLogger(__name__)

_SCHEDULE_FIELDS = ("minute", "hour", "day", "month", "dayofweek")


class JsonTaskSource:
    """
    Read-only task source backed by a JSON document.

    Expected shape (a list, order preserved):

        [{"id": 7, "enabled": true,
          "source": {"name": "FTP", "type": "ftp", "settings": {"host": "a.example"}},
          "target": {...}, "processor": {...},
          "schedule": {"hour": "2", "minute": "0", "description": "Daily at 02:00",
                       "next_run": "2026-10-19T02:00:00+00:00"}}]

    Naive next_run timestamps are interpreted in `default_tz`.
    """

    def __init__(self, path: str | Path, *, default_tz: tzinfo) -> None:
        self._path = Path(path)
        self._default_tz = default_tz

    def list_tasks(self) -> list[EtlTask]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            raise InvalidTaskError(f"Task file not found: {self._path}") from None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidTaskError(f"Task file is not valid JSON: {self._path}: {e}") from e

        tasks = parse_tasks(data, default_tz=self._default_tz)
        logger.info("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks


def parse_tasks(data: Any, *, default_tz: tzinfo) -> list[EtlTask]:
    if isinstance(data, Mapping) and "tasks" in data:
        data = data["tasks"]
    if not isinstance(data, list):
        raise InvalidTaskError("Task document must be a list of task objects")

    out: list[EtlTask] = []
    for idx, entry in enumerate(data):
        try:
            out.append(parse_task(entry, default_tz=default_tz))
        except InvalidTaskError as e:
            raise InvalidTaskError(f"Task #{idx}: {e}") from e
    return out


def parse_task(entry: Any, *, default_tz: tzinfo) -> EtlTask:
    if not isinstance(entry, Mapping):
        raise InvalidTaskError("task must be an object")

    task_id = entry.get("id")
    if task_id is None or isinstance(task_id, bool) or not isinstance(task_id, (int, str)):
        raise InvalidTaskError("task id must be an int or a string")

    enabled = entry.get("enabled", True)
    if not isinstance(enabled, bool):
        raise InvalidTaskError("enabled must be a boolean")

    return EtlTask(
        id=task_id,
        source=_parse_item(ItemKind.SOURCE, entry.get("source")),
        target=_parse_item(ItemKind.TARGET, entry.get("target")),
        processor=_parse_item(ItemKind.PROCESSOR, entry.get("processor")),
        schedule=_parse_schedule(entry.get("schedule"), default_tz=default_tz),
        enabled=enabled,
    )


def _parse_item(kind: ItemKind, raw: Any):
    if not isinstance(raw, Mapping):
        raise InvalidTaskError(f"{kind} must be an object")

    settings = raw.get("settings") or {}
    if not isinstance(settings, Mapping):
        raise InvalidTaskError(f"{kind} settings must be an object")

    return build_item(
        kind,
        name=raw.get("name"),
        type=str(raw.get("type") or "default"),
        settings=dict(settings),
    )


def _parse_schedule(raw: Any, *, default_tz: tzinfo) -> Schedule:
    if not isinstance(raw, Mapping):
        raise InvalidTaskError("schedule must be an object")

    fields = {name: _parse_cron_field(name, raw.get(name)) for name in _SCHEDULE_FIELDS}

    description = raw.get("description")
    if description is not None and not isinstance(description, str):
        raise InvalidTaskError("schedule description must be a string")

    return Schedule(
        **fields,
        description=description,
        next_run=_parse_timestamp(raw.get("next_run"), default_tz=default_tz),
    )


def _parse_cron_field(name: str, value: Any) -> str:
    # Absent or null fields mean "every".
    if value is None:
        return "*"
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidTaskError(f"schedule {name} must be a string or an integer")
    text = str(value).strip()
    if not text:
        raise InvalidTaskError(f"schedule {name} must not be empty")
    return text


def _parse_timestamp(raw: Any, *, default_tz: tzinfo) -> datetime | None:
    if raw is None or raw == "":
        return None

    if isinstance(raw, bool):
        raise InvalidTaskError("next_run must be an ISO timestamp or epoch seconds")

    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw, tz=default_tz)
        except (OverflowError, OSError, ValueError):
            raise InvalidTaskError(f"next_run is out of range: {raw!r}") from None

    if not isinstance(raw, str):
        raise InvalidTaskError("next_run must be an ISO timestamp or epoch seconds")

    try:
        value = datetime.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidTaskError(f"next_run is not an ISO timestamp: {raw!r}") from None

    if value.tzinfo is None:
        value = value.replace(tzinfo=default_tz)
    return value
