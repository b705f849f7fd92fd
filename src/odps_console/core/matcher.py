"""Two-stage command matching: grammar, then validation."""

from __future__ import annotations

from loguru import logger

from odps_console.core.grammar import try_match
from odps_console.core.types import ParsedCommand
from odps_console.core.validator import validate
from odps_console.errors import BadCommandError
from odps_console.session import SessionContext


class CommandMatcher:
    """Classify and decompose one line of console input."""

    def __init__(self, session: SessionContext) -> None:
        self._session = session

    @property
    def session(self) -> SessionContext:
        return self._session

    def match(self, text: str) -> ParsedCommand | None:
        """Return the parsed command, or ``None`` when no grammar applies.

        Raises ``BadCommandError`` when a grammar applies but the parameters
        are invalid.
        """

        if not text or not text.strip():
            return None

        matched = try_match(text)
        if matched is None:
            logger.debug("command.mismatch text={!r}", text)
            return None

        try:
            command = validate(matched, self._session.default_project_name)
        except BadCommandError as exc:
            logger.info("command.rejected grammar={} reason={}", matched.grammar, exc.detail)
            raise

        logger.debug(
            "command.match grammar={} kind={} project={} object={} prefix={}",
            matched.grammar,
            command.kind.value,
            command.project_name,
            command.object_name,
            command.filter_pattern,
        )
        return command
