# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from etl_admin.tasks.task_models import (
    SECRET_MASK,
    EtlTask,
    InvalidTaskError,
    ItemKind,
    Processor,
    Schedule,
    Source,
    Target,
    build_item,
)


def test_settings_for_display_keeps_order_and_stringifies() -> None:
    item = Source(name="SFTP", type="sftp", settings={"host": "h", "port": 22, "key": "---BEGIN", "path": None})

    assert list(item.settings_for_display().items()) == [
        ("host", "h"),
        ("port", "22"),
        ("key", SECRET_MASK),
        ("path", ""),
    ]


def test_item_kinds() -> None:
    assert Source(name="a").kind is ItemKind.SOURCE
    assert Target(name="a").kind is ItemKind.TARGET
    assert Processor(name="a").kind is ItemKind.PROCESSOR


def test_build_item_picks_variant() -> None:
    item = build_item("Target", name="Dataroot", type="dataroot", settings={"path": "/x"})

    assert isinstance(item, Target)
    assert item.settings_for_display() == {"path": "/x"}


def test_build_item_rejects_unknown_kind() -> None:
    with pytest.raises(InvalidTaskError, match="Unknown item kind"):
        build_item("sink", name="x")


@pytest.mark.parametrize("name", ["", "   ", None])
def test_item_name_is_required(name) -> None:
    with pytest.raises(InvalidTaskError, match="source name"):
        Source(name=name)


def test_schedule_requires_aware_next_run() -> None:
    with pytest.raises(InvalidTaskError):
        Schedule(next_run=datetime(2026, 1, 1))


def test_schedule_formatting() -> None:
    assert Schedule(minute="*/5").formatted() == "*/5 * * * *"
    assert Schedule(description="Every five minutes").formatted() == "Every five minutes"
    assert Schedule().scheduled_time() is None

    when = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert Schedule(next_run=when).scheduled_time() == when


def test_task_requires_all_parts() -> None:
    with pytest.raises(InvalidTaskError, match="processor, schedule"):
        EtlTask(id=1, source=Source(name="s"), target=Target(name="t"), processor=None, schedule=None)


def test_task_enabled_flag() -> None:
    parts = dict(source=Source(name="s"), target=Target(name="t"), processor=Processor(name="p"), schedule=Schedule())

    assert EtlTask(id=1, **parts).is_enabled()
    assert not EtlTask(id=2, enabled=False, **parts).is_enabled()
