"""Statement execution and the interactive loop."""

from __future__ import annotations

import requests
from loguru import logger

from odps_console.client.base import ServiceClient
from odps_console.core.executor import CommandExecutor
from odps_console.core.matcher import CommandMatcher
from odps_console.core.types import ParsedCommand
from odps_console.errors import BadCommandError, ConsoleError
from odps_console.render import Renderer
from odps_console.usage import usage_lines

EXIT_WORDS = {"quit", "exit", "q"}


def strip_terminator(text: str) -> str:
    """Drop the trailing ``;`` statement terminator, if any."""

    stripped = text.rstrip()
    while stripped.endswith(";"):
        stripped = stripped[:-1].rstrip()
    return stripped


def parse_statement(text: str, matcher: CommandMatcher, renderer: Renderer) -> ParsedCommand | None:
    """Parse one statement, reporting mismatches and bad commands."""

    statement = strip_terminator(text)
    try:
        command = matcher.match(statement)
    except BadCommandError as exc:
        renderer.error(str(exc))
        return None
    if command is None:
        renderer.error(f"Unrecognized command: {statement.strip()}")
    return command


def execute_statement(command: ParsedCommand, client: ServiceClient, renderer: Renderer) -> bool:
    """Execute a parsed statement; return whether it succeeded."""

    try:
        CommandExecutor(client, renderer).execute(command)
    except ConsoleError as exc:
        renderer.error(str(exc))
        return False
    except requests.RequestException as exc:
        logger.opt(exception=exc).debug("client.request.failed")
        renderer.error(f"Request failed: {exc!s}")
        return False
    return True


def run_statement(text: str, matcher: CommandMatcher, client: ServiceClient, renderer: Renderer) -> bool:
    command = parse_statement(text, matcher, renderer)
    if command is None:
        return False
    return execute_statement(command, client, renderer)


def run_shell(matcher: CommandMatcher, client: ServiceClient, renderer: Renderer) -> None:
    project = matcher.session.default_project_name or "(none)"
    renderer.info(f"Project: {project}. Type 'help' for usage, 'quit' to leave.")
    while True:
        try:
            user_input = renderer.get_user_input()
        except (KeyboardInterrupt, EOFError):
            renderer.info("Goodbye!")
            break

        statement = strip_terminator(user_input).strip()
        if not statement:
            continue
        if statement.lower() in EXIT_WORDS:
            renderer.info("Goodbye!")
            break
        words = statement.split()
        if words[0].lower() == "help":
            lines = usage_lines(words[1:])
            if not lines:
                renderer.error(f"No command matches: {' '.join(words[1:])}")
            for line in lines:
                renderer.write_result(line)
            continue
        run_statement(statement, matcher, client, renderer)
