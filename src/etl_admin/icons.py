# src/etl_admin/icons.py

from __future__ import annotations

from urllib.parse import quote


class PixIconResolver:
    """Map logical icon names ("t/edit") to asset URLs under one base."""

    def __init__(self, base_url: str, *, extension: str = "svg") -> None:
        self.base_url = base_url.rstrip("/")
        self.extension = extension

    def url(self, icon: str) -> str:
        name = icon.strip().strip("/")
        if not name:
            raise ValueError("Icon name must not be empty")
        return f"{self.base_url}/{quote(name)}.{self.extension}"
