"""Regex grammars for console commands.

Each grammar only decides whether a line has its shape and pulls out the raw
pieces. Option tokens are left in ``args_text`` for the validator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from odps_console.core.types import CommandKind, MatchedCommand

_FLAGS = re.IGNORECASE | re.DOTALL | re.ASCII

INTERNAL_LIST_RE = re.compile(
    r"\s*SHOW\s+TABLES"
    r"(?:\s+IN\s+(?P<project>\w+))?"
    r"(?:\s+LIKE\s+'(?P<pattern>[\w%*]*[%*])')?"
    r"\s*",
    _FLAGS,
)
PUBLIC_LIST_RE = re.compile(r"\s*(?:LS|LIST)\s+TABLES(?:\s+(?P<rest>.*?))?\s*", _FLAGS)
DESCRIBE_ONLINE_MODEL_RE = re.compile(r"\s*(?:DESCRIBE|DESC)\s+ONLINEMODEL\s+(?P<rest>.+)", _FLAGS)


@dataclass(frozen=True)
class Grammar:
    """One command shape, owned by a fixed set of leading keywords."""

    name: str
    kind: CommandKind
    keywords: tuple[str, ...]
    pattern: re.Pattern[str]
    usage: tuple[str, ...]
    help_tags: tuple[str, ...]

    def try_match(self, text: str) -> MatchedCommand | None:
        match = self.pattern.fullmatch(text)
        if match is None:
            return None

        groups = match.groupdict()
        pattern = groups.get("pattern")
        return MatchedCommand(
            kind=self.kind,
            grammar=self.name,
            raw=text,
            project=groups.get("project"),
            prefix=pattern[:-1] if pattern is not None else None,
            args_text=(groups.get("rest") or "").strip(),
        )


INTERNAL_LIST_TABLES = Grammar(
    name="internal",
    kind=CommandKind.LIST_TABLES,
    keywords=("SHOW",),
    pattern=INTERNAL_LIST_RE,
    usage=("Usage: show tables [in <project_name>] [like '<prefix>%']",),
    help_tags=("show", "table", "tables", "list"),
)

PUBLIC_LIST_TABLES = Grammar(
    name="public",
    kind=CommandKind.LIST_TABLES,
    keywords=("LS", "LIST"),
    pattern=PUBLIC_LIST_RE,
    usage=("Usage: ls|list tables [-p,-project <project_name>]",),
    help_tags=("ls", "list", "table", "tables"),
)

DESCRIBE_ONLINE_MODEL = Grammar(
    name="describe",
    kind=CommandKind.DESCRIBE_ONLINE_MODEL,
    keywords=("DESCRIBE", "DESC"),
    pattern=DESCRIBE_ONLINE_MODEL_RE,
    usage=(
        "Usage: describe|desc onlinemodel [-p,-project <project_name>] <onlinemodel_name>",
        "       describe|desc onlinemodel [<project_name>.]<onlinemodel_name>",
    ),
    help_tags=("describe", "desc", "online", "model", "onlinemodel"),
)

GRAMMARS: tuple[Grammar, ...] = (PUBLIC_LIST_TABLES, INTERNAL_LIST_TABLES, DESCRIBE_ONLINE_MODEL)


def leading_keyword(text: str) -> str:
    """Return the first whitespace-delimited token, upper-cased."""

    words = text.split(None, 1)
    if not words:
        return ""
    return words[0].upper()


def grammar_for(text: str) -> Grammar | None:
    """Pick the single grammar owning the text's leading keyword."""

    keyword = leading_keyword(text)
    for grammar in GRAMMARS:
        if keyword in grammar.keywords:
            return grammar
    return None


def try_match(text: str) -> MatchedCommand | None:
    """Match text against the grammar selected by its leading keyword."""

    grammar = grammar_for(text)
    if grammar is None:
        return None
    return grammar.try_match(text)
