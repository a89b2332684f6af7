# src/etl_admin/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the renderer.

The renderer depends on Protocols instead of concrete implementations.
This keeps the host integration (strings, icons, URLs, task storage)
swappable and makes testing easier.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Protocol

TaskId = int | str


class Displayable(Protocol):
    """Source/target/processor capability: a name plus settings meant for humans."""

    @property
    def name(self) -> str: ...

    def settings_for_display(self) -> Mapping[str, str]: ...


class ScheduleView(Protocol):
    """Recurrence rule description plus an optional computed next run."""

    def formatted(self) -> str: ...

    def scheduled_time(self) -> datetime | None: ...


class TaskRecord(Protocol):
    @property
    def id(self) -> TaskId: ...

    @property
    def source(self) -> Displayable: ...

    @property
    def target(self) -> Displayable: ...

    @property
    def processor(self) -> Displayable: ...

    @property
    def schedule(self) -> ScheduleView: ...

    def is_enabled(self) -> bool: ...


class Translator(Protocol):
    """
    Localization service.

    Must raise LookupError for unknown keys rather than return placeholders.
    """

    def get_string(self, key: str, component: str = "core") -> str: ...


class DateFormatter(Protocol):
    def format(self, value: datetime) -> str: ...


class IconResolver(Protocol):
    def url(self, icon: str) -> str: ...


class UrlBuilder(Protocol):
    def history_url(self, task_id: TaskId) -> str: ...
    def status_url(self, task_id: TaskId) -> str: ...
    def edit_url(self, task_id: TaskId) -> str: ...
    def delete_url(self, task_id: TaskId) -> str: ...


class TaskSource(Protocol):
    """Supplies task records in display order."""

    def list_tasks(self) -> Sequence[TaskRecord]: ...
