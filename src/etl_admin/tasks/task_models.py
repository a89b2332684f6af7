# src/etl_admin/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

SECRET_MASK = "********"

# Settings whose values must never be shown in the admin UI.
SECRET_SETTINGS = frozenset({"password", "passphrase", "privatekey", "key", "secret", "token"})


class InvalidTaskError(ValueError):
    """A task record (or a document describing one) is malformed."""


class ItemKind(StrEnum):
    SOURCE = "source"
    TARGET = "target"
    PROCESSOR = "processor"

    @classmethod
    def parse(cls, raw: str) -> ItemKind:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise InvalidTaskError(f"Unknown item kind: {raw!r}") from None


@dataclass(slots=True)
class TaskItem:
    """
    Base for displayable task items (source, target, processor).

    `type` names the concrete plugin (e.g. "ftp", "sftp", "dataroot").
    `settings` keeps insertion order; that order is the display order.
    """

    name: str
    type: str = "default"
    settings: dict[str, Any] = field(default_factory=dict)

    kind = ItemKind.SOURCE  # overridden by subclasses

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidTaskError(f"{self.kind} name must be a non-empty string")
        if self.settings is None:
            self.settings = {}

    def settings_for_display(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for key, value in self.settings.items():
            key_s = str(key)
            if key_s.lower() in SECRET_SETTINGS:
                out[key_s] = SECRET_MASK
            elif value is None:
                out[key_s] = ""
            else:
                out[key_s] = str(value)
        return out


@dataclass(slots=True)
class Source(TaskItem):
    kind = ItemKind.SOURCE


@dataclass(slots=True)
class Target(TaskItem):
    kind = ItemKind.TARGET


@dataclass(slots=True)
class Processor(TaskItem):
    kind = ItemKind.PROCESSOR


ITEM_CLASSES: dict[ItemKind, type[TaskItem]] = {
    ItemKind.SOURCE: Source,
    ItemKind.TARGET: Target,
    ItemKind.PROCESSOR: Processor,
}


def build_item(
    kind: str | ItemKind,
    *,
    name: str,
    type: str = "default",
    settings: dict[str, Any] | None = None,
) -> TaskItem:
    cls = ITEM_CLASSES[ItemKind.parse(str(kind))]
    return cls(name=name, type=type, settings=dict(settings or {}))


@dataclass(frozen=True, slots=True)
class Schedule:
    """
    Cron-style recurrence plus the next run computed by the scheduler.

    next_run must be timezone-aware; comparing it to "now" is the renderer's job.
    """

    minute: str = "*"
    hour: str = "*"
    day: str = "*"
    month: str = "*"
    dayofweek: str = "*"
    description: str | None = None
    next_run: datetime | None = None

    def __post_init__(self) -> None:
        if self.next_run is not None:
            if not isinstance(self.next_run, datetime):
                raise InvalidTaskError("next_run must be a datetime")
            if self.next_run.tzinfo is None or self.next_run.utcoffset() is None:
                raise InvalidTaskError("next_run must be timezone-aware")

    def formatted(self) -> str:
        if self.description:
            return self.description
        return f"{self.minute} {self.hour} {self.day} {self.month} {self.dayofweek}"

    def scheduled_time(self) -> datetime | None:
        return self.next_run


@dataclass(frozen=True, slots=True)
class EtlTask:
    id: int | str
    source: TaskItem
    target: TaskItem
    processor: TaskItem
    schedule: Schedule
    enabled: bool = True

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("id", "source", "target", "processor", "schedule")
            if getattr(self, name) is None
        ]
        if missing:
            raise InvalidTaskError(f"Task is missing required fields: {', '.join(missing)}")

    def is_enabled(self) -> bool:
        return bool(self.enabled)
