"""Command usage text and help lookup."""

from __future__ import annotations

from odps_console.core.grammar import GRAMMARS, Grammar


def find_grammars(keywords: list[str]) -> list[Grammar]:
    """Return grammars whose help tags contain every keyword."""

    wanted = [keyword.lower() for keyword in keywords if keyword.strip()]
    return [grammar for grammar in GRAMMARS if all(word in grammar.help_tags for word in wanted)]


def usage_lines(keywords: list[str] | None = None) -> list[str]:
    lines: list[str] = []
    for grammar in find_grammars(keywords or []):
        lines.extend(grammar.usage)
    return lines
