"""Execution of validated commands against the service client."""

from __future__ import annotations

from loguru import logger

from odps_console.client.base import ServiceClient
from odps_console.core.types import CommandKind, ParsedCommand
from odps_console.errors import BadCommandError, NotFoundError
from odps_console.render import OutputWriter, format_online_model


class CommandExecutor:
    """Run one parsed command and write its output lines."""

    def __init__(self, client: ServiceClient, writer: OutputWriter) -> None:
        self._client = client
        self._writer = writer

    def execute(self, command: ParsedCommand) -> None:
        logger.debug("command.execute kind={} project={}", command.kind.value, command.project_name)
        if command.kind is CommandKind.LIST_TABLES:
            self._list_tables(command)
            return
        if command.kind is CommandKind.DESCRIBE_ONLINE_MODEL:
            self._describe_online_model(command)
            return
        raise BadCommandError(f"Unsupported command: {command.source_text.strip()}")

    def _list_tables(self, command: ParsedCommand) -> None:
        count = 0
        for name in self._client.list_tables(command.project_name, command.filter_pattern or None):
            self._writer.write_result(name)
            count += 1
        self._writer.info(f"{count} tables")

    def _describe_online_model(self, command: ParsedCommand) -> None:
        name = command.object_name or ""
        if not self._client.online_model_exists(command.project_name, name):
            raise NotFoundError("Onlinemodel", name)
        model = self._client.get_online_model(command.project_name, name)
        for line in format_online_model(model):
            self._writer.write_result(line)
