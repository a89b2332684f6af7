# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from etl_admin.cli.bootstrap import build_task_table, create_initial_state
from etl_admin.core.state import AppState
from etl_admin.render.task_table import TaskTableRenderer
from etl_admin.tasks.task_models import EtlTask, Processor, Schedule, Source, Target

from .fakes import FixedClock

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="etl-admin-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        admin_base_url="/admin/tool/etl",
        pix_base_url="/pix",
        legacy_history_param=False,
        lang="en",
        strings_path=None,
        timezone="UTC",
        date_format="%Y-%m-%d %H:%M",
        table_id_prefix="tool-etl-tasks-",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def renderer(state: AppState, clock: FixedClock) -> TaskTableRenderer:
    return build_task_table(state, table_id="tasks", clock=clock)


def make_task(
    task_id: int = 7,
    *,
    enabled: bool = True,
    next_run: datetime | None = None,
    source_settings: dict | None = None,
    description: str | None = "Daily at 02:00",
) -> EtlTask:
    return EtlTask(
        id=task_id,
        source=Source(name="FTP", type="ftp", settings=source_settings or {"host": "a.example"}),
        target=Target(name="Dataroot", type="dataroot", settings={"path": "/data/etl"}),
        processor=Processor(name="Default", settings={}),
        schedule=Schedule(minute="0", hour="2", description=description, next_run=next_run),
        enabled=enabled,
    )
