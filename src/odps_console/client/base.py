"""Service client interface consumed by the executor."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from odps_console.client.models import OnlineModel


class ServiceClient(Protocol):
    def list_tables(self, project: str | None, prefix: str | None = None) -> Iterable[str]: ...

    def online_model_exists(self, project: str | None, name: str) -> bool: ...

    def get_online_model(self, project: str | None, name: str) -> OnlineModel: ...
