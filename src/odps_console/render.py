"""Console output and record formatting."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Protocol

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.markup import escape

from odps_console.client.models import OnlineModel

BOX_BORDER = "+-------------------------------------------------+"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class OutputWriter(Protocol):
    def write_result(self, line: str) -> None: ...

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class Renderer:
    """Terminal writer: results on stdout, diagnostics on stderr."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False, soft_wrap=True)
        self.err_console: Console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._prompt_session: PromptSession[str] | None = None

    def write_result(self, line: str) -> None:
        """Write one result line verbatim."""
        self.console.print(line, markup=False, emoji=False)

    def info(self, message: str) -> None:
        self.err_console.print(f"[dim]{escape(message)}[/dim]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def get_user_input(self, prompt: str = "odps> ") -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        return self._prompt_session.prompt(prompt)


def format_online_model(model: OnlineModel) -> list[str]:
    """Render online model metadata as a bordered block of labeled lines."""

    fields: list[tuple[str, Any]] = [
        ("Project", model.project),
        ("Name", model.name),
        ("Version", model.version),
        ("Owner", model.owner),
        ("CreateTime", _format_date(model.created_time)),
        ("LastModifiedTime", _format_date(model.last_modified_time)),
        ("OfflineModelProject", model.offline_model_project),
        ("OfflineModelName", model.offline_model_name),
        ("OfflineModelId", model.offline_model_id),
        ("ApplyResource", _to_json(model.apply_resource)),
        ("UsedResource", _to_json(model.used_resource)),
        ("QOS", model.apply_qos),
        ("InstanceNum", model.instance_num),
        ("Status", model.status),
        ("ServiceTag", model.service_tag),
        ("ServiceName", model.service_name),
        ("LastFailMsg", model.failed_msg),
        ("ABTest", model.ab_test),
        ("PredictDesc", model.predict_desc),
        ("Runtime", model.runtime),
    ]
    lines = ["", BOX_BORDER]
    lines.extend(f"| {label}: {_text(value)}" for label, value in fields)
    lines.extend([BOX_BORDER, ""])
    return lines


def _format_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return _to_json(value)
    return str(value)
