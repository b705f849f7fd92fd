from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from odps_console.client.models import OnlineModel
from odps_console.errors import NotFoundError


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("ODPS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@dataclass
class FakeClient:
    tables: list[str] = field(default_factory=list)
    models: dict[tuple[str | None, str], OnlineModel] = field(default_factory=dict)
    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)
    closed: bool = False

    def list_tables(self, project: str | None, prefix: str | None = None) -> Iterable[str]:
        self.calls.append(("list_tables", (project, prefix)))
        return [name for name in self.tables if not prefix or name.startswith(prefix)]

    def online_model_exists(self, project: str | None, name: str) -> bool:
        self.calls.append(("online_model_exists", (project, name)))
        return (project, name) in self.models

    def get_online_model(self, project: str | None, name: str) -> OnlineModel:
        self.calls.append(("get_online_model", (project, name)))
        try:
            return self.models[(project, name)]
        except KeyError:
            raise NotFoundError("Onlinemodel", name) from None

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeWriter:
    results: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def write_result(self, line: str) -> None:
        self.results.append(line)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def fake_writer() -> FakeWriter:
    return FakeWriter()
