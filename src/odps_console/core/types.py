"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandKind(str, Enum):
    """Command families the console understands."""

    LIST_TABLES = "list_tables"
    DESCRIBE_ONLINE_MODEL = "describe_online_model"


@dataclass(frozen=True)
class MatchedCommand:
    """Syntactic match of one line against a grammar."""

    kind: CommandKind
    grammar: str  # internal|public|describe
    raw: str
    project: str | None = None
    prefix: str | None = None
    args_text: str = ""


@dataclass(frozen=True)
class ParsedCommand:
    """Validated command ready for execution."""

    kind: CommandKind
    project_name: str | None
    object_name: str | None = None
    filter_pattern: str | None = None
    source_text: str = ""
