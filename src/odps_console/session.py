"""Per-invocation session context."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    """Read-only context supplying the default project."""

    default_project_name: str | None = None

    def with_project(self, project: str | None) -> SessionContext:
        if project is None:
            return self
        return SessionContext(default_project_name=project)
