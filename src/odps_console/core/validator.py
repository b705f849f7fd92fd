"""Parameter validation for matched commands."""

from __future__ import annotations

import re

from odps_console.core.options import PROJECT_OPTION, parse_command_words, parse_option_arguments
from odps_console.core.types import CommandKind, MatchedCommand, ParsedCommand
from odps_console.errors import BadCommandError, InvalidParameterError, ProjectConflictError

OBJECT_NAME_RE = re.compile(r"[.\w]+", re.ASCII)


def resolve_project(flag: str | None, dotted: str | None, default: str | None) -> str | None:
    """Reconcile project sources: flag, then dotted prefix, then session default.

    Raises ``ProjectConflictError`` when flag and dotted prefix are both set
    and differ.
    """

    if flag is not None and dotted is not None and flag != dotted:
        raise ProjectConflictError(flag, dotted)
    if flag is not None:
        return flag
    if dotted is not None:
        return dotted
    return default


def split_object_name(name: str) -> tuple[str | None, str]:
    """Split ``project.name`` on the first dot."""

    if "." not in name:
        return None, name
    project, _, rest = name.partition(".")
    return project, rest


def validate(matched: MatchedCommand, default_project: str | None) -> ParsedCommand:
    """Turn a syntactic match into a validated command."""

    if matched.kind is CommandKind.LIST_TABLES:
        return _validate_list(matched, default_project)
    if matched.kind is CommandKind.DESCRIBE_ONLINE_MODEL:
        return _validate_describe(matched, default_project)
    raise BadCommandError(f"Unsupported command: {matched.raw.strip()}")


def _validate_list(matched: MatchedCommand, default_project: str | None) -> ParsedCommand:
    flag = matched.project
    if matched.grammar == "public":
        args = parse_option_arguments(parse_command_words(matched.args_text))
        if args.positional:
            raise InvalidParameterError(args.positional[0])
        flag = _single_flag(args.values(PROJECT_OPTION))

    return ParsedCommand(
        kind=matched.kind,
        project_name=resolve_project(flag, None, default_project),
        filter_pattern=matched.prefix,
        source_text=matched.raw,
    )


def _validate_describe(matched: MatchedCommand, default_project: str | None) -> ParsedCommand:
    args = parse_option_arguments(parse_command_words(matched.args_text))
    flag = _single_flag(args.values(PROJECT_OPTION))

    if len(args.positional) != 1:
        raise BadCommandError("Model name is ambiguous.")
    name = args.positional[0]
    if OBJECT_NAME_RE.fullmatch(name) is None:
        raise BadCommandError("Invalid model name.")

    dotted, model_name = split_object_name(name)
    if not model_name or dotted == "":
        raise BadCommandError("Invalid model name.")

    return ParsedCommand(
        kind=matched.kind,
        project_name=resolve_project(flag, dotted, default_project),
        object_name=model_name,
        source_text=matched.raw,
    )


def _single_flag(values: list[str]) -> str | None:
    if not values:
        return None
    first = values[0]
    for value in values[1:]:
        if value != first:
            raise ProjectConflictError(first, value)
    return first
