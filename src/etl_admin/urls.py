# src/etl_admin/urls.py

from __future__ import annotations

from urllib.parse import urlencode

from .core.ports import TaskId

# Endpoints of the admin tool, relative to the tool's base URL.
HISTORY_ENDPOINT = "history.php"
STATUS_ENDPOINT = "status.php"
EDIT_ENDPOINT = "index.php"
DELETE_ENDPOINT = "delete.php"


class AdminUrlBuilder:
    """
    Navigational URLs for per-task actions.

    Every endpoint takes the task id as `id`. Older history endpoints expect
    `taskid`; set legacy_history_param to keep them working.
    """

    def __init__(self, base_url: str, *, legacy_history_param: bool = False) -> None:
        self.base_url = base_url.rstrip("/")
        self.history_param = "taskid" if legacy_history_param else "id"

    def _build(self, endpoint: str, params: dict[str, TaskId]) -> str:
        return f"{self.base_url}/{endpoint}?{urlencode(params)}"

    def history_url(self, task_id: TaskId) -> str:
        return self._build(HISTORY_ENDPOINT, {self.history_param: task_id})

    def status_url(self, task_id: TaskId) -> str:
        return self._build(STATUS_ENDPOINT, {"id": task_id})

    def edit_url(self, task_id: TaskId) -> str:
        return self._build(EDIT_ENDPOINT, {"id": task_id})

    def delete_url(self, task_id: TaskId) -> str:
        return self._build(DELETE_ENDPOINT, {"id": task_id})
