"""Command argument parsing helpers."""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from odps_console.errors import BadCommandError, InvalidParameterError, MissingArgumentError

PROJECT_OPTION = "project"
PROJECT_ALIASES = {"p": PROJECT_OPTION, "project": PROJECT_OPTION}


@dataclass(frozen=True)
class ParsedArgs:
    """Parsed command arguments."""

    options: dict[str, list[str]]
    positional: list[str]

    def values(self, name: str) -> list[str]:
        return self.options.get(name, [])


def parse_command_words(text: str) -> list[str]:
    """Split command text into words using shell rules."""

    try:
        return shlex.split(text)
    except ValueError as exc:
        raise BadCommandError(f"Unbalanced quotes in: {text.strip()}") from exc


def parse_option_arguments(tokens: list[str], aliases: dict[str, str] | None = None) -> ParsedArgs:
    """Parse ``-name value`` and ``-name=value`` options out of tokens.

    Both single and double dash prefixes are accepted. Option names are
    mapped through ``aliases``; unknown names raise ``InvalidParameterError``
    and options without a value raise ``MissingArgumentError``.
    """

    aliases = PROJECT_ALIASES if aliases is None else aliases
    options: dict[str, list[str]] = {}
    positional: list[str] = []
    idx = 0
    while idx < len(tokens):
        token = tokens[idx]

        if not _is_option(token):
            positional.append(token)
            idx += 1
            continue

        key = token.lstrip("-")
        if "=" in key:
            name, value = key.split("=", 1)
            canonical = _canonical(name, token, aliases)
            if not value:
                raise MissingArgumentError(f"-{name}")
            options.setdefault(canonical, []).append(value)
            idx += 1
            continue

        canonical = _canonical(key, token, aliases)
        if idx + 1 >= len(tokens) or _is_option(tokens[idx + 1]):
            raise MissingArgumentError(token)
        options.setdefault(canonical, []).append(tokens[idx + 1])
        idx += 2

    return ParsedArgs(options=options, positional=positional)


def _is_option(token: str) -> bool:
    return token.startswith("-") and len(token) > 1


def _canonical(name: str, token: str, aliases: dict[str, str]) -> str:
    canonical = aliases.get(name)
    if canonical is None:
        raise InvalidParameterError(token)
    return canonical
