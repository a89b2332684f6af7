# src/etl_admin/render/task_table.py

"""
Admin listing of ETL tasks.

One row per task: source, target, processor, schedule, enabled flag and
action links (history, enable/disable, edit, delete). Links only navigate;
the endpoints behind them perform the actions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from ..core.ports import (
    DateFormatter,
    Displayable,
    IconResolver,
    ScheduleView,
    TaskRecord,
    Translator,
    UrlBuilder,
)
from ..tasks.task_models import InvalidTaskError
from . import html
from .table import Column, Row, TableRenderer

logger = logging.getLogger(__name__)

COMPONENT = "tool_etl"

DIMMED_CLASS = "dimmed_text"
ICON_CLASS = "iconsmall"

# (column name, string key, string component)
COLUMNS: tuple[tuple[str, str, str], ...] = (
    ("source", "source", COMPONENT),
    ("target", "target", COMPONENT),
    ("processor", "processor", COMPONENT),
    ("schedule", "schedule", COMPONENT),
    ("enabled", "enabled", COMPONENT),
    ("actions", "actions", "core"),
)

_REQUIRED_FIELDS = ("source", "target", "processor", "schedule")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskTableRenderer:
    def __init__(
        self,
        *,
        table_id: str,
        strings: Translator,
        icons: IconResolver,
        urls: UrlBuilder,
        dates: DateFormatter,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.table_id = table_id
        self.strings = strings
        self.icons = icons
        self.urls = urls
        self.dates = dates
        self.clock = clock

    def render(self, tasks: Iterable[TaskRecord]) -> str:
        """Render the whole table (headers + one row per task, input order kept)."""
        columns = [
            Column(name=name, header=self.strings.get_string(key, component))
            for name, key, component in COLUMNS
        ]
        table: TableRenderer[TaskRecord] = TableRenderer(self.table_id, columns)

        # One clock reading per render keeps every clamped row consistent.
        now = self.clock()
        tasks = list(tasks)
        output = table.render(tasks, lambda task: self.build_row(task, now=now))

        logger.debug("Rendered task table id=%s rows=%d", self.table_id, len(tasks))
        return output

    def build_row(self, task: TaskRecord, *, now: datetime) -> Row:
        _check_task(task)

        if task.is_enabled():
            css_class = ""
            enabled = self.strings.get_string("yes")
        else:
            css_class = DIMMED_CLASS
            enabled = self.strings.get_string("no")

        return Row(
            cells=(
                self.display_item(task.source),
                self.display_item(task.target),
                self.display_item(task.processor),
                self.display_schedule(task.schedule, now=now),
                html.text(enabled),
                self.action_buttons(task),
            ),
            css_class=css_class,
        )

    def display_item(self, item: Displayable) -> str:
        output = html.tag("strong", html.text(item.name))

        settings = item.settings_for_display()
        if settings:
            output += html.empty_tag("br")
            for name, value in settings.items():
                output += html.div(html.text(f"{name}: {value}"))

        return output

    def display_schedule(self, schedule: ScheduleView, *, now: datetime) -> str:
        output = html.text(schedule.formatted())

        next_run = schedule.scheduled_time()
        if next_run is not None:
            # Display only: a run time already in the past is about to happen.
            if next_run < now:
                next_run = now
            output += html.empty_tag("br") + html.text(self.dates.format(next_run))

        return output

    def action_buttons(self, task: TaskRecord) -> str:
        if task.is_enabled():
            toggle_icon, toggle_title = "t/hide", "disable"
        else:
            toggle_icon, toggle_title = "t/show", "enable"

        buttons = "".join(
            (
                self._icon_link(
                    self.urls.history_url(task.id),
                    "t/viewdetails",
                    self.strings.get_string("viewhistory", COMPONENT),
                ),
                self._icon_link(
                    self.urls.status_url(task.id),
                    toggle_icon,
                    self.strings.get_string(toggle_title),
                ),
                self._icon_link(
                    self.urls.edit_url(task.id),
                    "t/edit",
                    self.strings.get_string("edit"),
                ),
                self._icon_link(
                    self.urls.delete_url(task.id),
                    "t/delete",
                    self.strings.get_string("delete"),
                ),
            )
        )
        return html.tag("span", buttons, {"class": "nowrap"})

    def _icon_link(self, href: str, icon: str, title: str) -> str:
        img = html.empty_tag("img", {"src": self.icons.url(icon), "alt": title, "class": ICON_CLASS})
        return html.link(href, img, {"title": title})


def _check_task(task: TaskRecord) -> None:
    missing = [name for name in _REQUIRED_FIELDS if getattr(task, name, None) is None]
    if missing:
        task_id = getattr(task, "id", None)
        raise InvalidTaskError(f"Task {task_id!r} is missing required fields: {', '.join(missing)}")
