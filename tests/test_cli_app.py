import importlib

import pytest
from typer.testing import CliRunner

from odps_console.client.models import OnlineModel
from odps_console.client.rest import RestServiceClient
from odps_console.render import Renderer

cli_app_module = importlib.import_module("odps_console.cli.app")


@pytest.fixture
def patched_client(monkeypatch, fake_client):
    created = []

    def _fake_build_client(settings):
        created.append(settings)
        return fake_client

    monkeypatch.setattr(cli_app_module, "build_client", _fake_build_client)
    return created


def test_run_show_tables_uses_project_option(patched_client, fake_client) -> None:
    fake_client.tables = ["tbl_a", "tbl_b"]

    result = CliRunner().invoke(cli_app_module.app, ["run", "show tables", "--project", "proj1"])

    assert result.exit_code == 0
    assert "tbl_a" in result.stdout
    assert "tbl_b" in result.stdout
    assert fake_client.calls == [("list_tables", ("proj1", None))]
    assert fake_client.closed is True


def test_run_uses_project_from_environment(monkeypatch, patched_client, fake_client) -> None:
    monkeypatch.setenv("ODPS_PROJECT", "env_proj")

    result = CliRunner().invoke(cli_app_module.app, ["run", "ls tables;"])

    assert result.exit_code == 0
    assert fake_client.calls == [("list_tables", ("env_proj", None))]


def test_run_bad_command_never_builds_client(patched_client) -> None:
    result = CliRunner().invoke(cli_app_module.app, ["run", "ls tables -p"])

    assert result.exit_code == 1
    assert "Missing argument" in result.output
    assert patched_client == []


def test_run_unrecognized_command(patched_client) -> None:
    result = CliRunner().invoke(cli_app_module.app, ["run", "select 1"])

    assert result.exit_code == 1
    assert "Unrecognized command: select 1" in result.output


def test_run_describe_not_found(patched_client) -> None:
    result = CliRunner().invoke(cli_app_module.app, ["run", "desc onlinemodel proj1.modelA"])

    assert result.exit_code == 1
    assert "Onlinemodel not found: modelA" in result.output


def test_run_describe_prints_record(patched_client, fake_client) -> None:
    fake_client.models[("proj1", "modelA")] = OnlineModel(project="proj1", name="modelA", owner="alice")

    result = CliRunner().invoke(cli_app_module.app, ["run", "describe onlinemodel -p proj1 modelA"])

    assert result.exit_code == 0
    assert "| Name: modelA" in result.stdout
    assert "| Owner: alice" in result.stdout


def test_run_without_endpoint_fails() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["run", "show tables in proj1"])

    assert result.exit_code == 1
    assert "endpoint is not configured" in result.output


def test_help_filters_by_keyword() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["help", "onlinemodel"])

    assert result.exit_code == 0
    assert "describe|desc onlinemodel" in result.output
    assert "show tables" not in result.output


def test_help_unknown_keyword() -> None:
    result = CliRunner().invoke(cli_app_module.app, ["help", "partition"])
    assert result.exit_code == 1


def test_shell_runs_statements_until_quit(monkeypatch, patched_client, fake_client) -> None:
    fake_client.tables = ["tbl_a"]
    inputs = iter(["", "help ls", "show tables in proj1;", "ls tables -xxx", "quit", "show tables"])
    monkeypatch.setattr(Renderer, "get_user_input", lambda self, prompt="odps> ": next(inputs))

    result = CliRunner().invoke(cli_app_module.app, ["shell", "-p", "proj0"])

    assert result.exit_code == 0
    assert "ls|list tables" in result.output
    assert "tbl_a" in result.output
    assert "Invalid parameter: -xxx" in result.output
    assert fake_client.calls == [("list_tables", ("proj1", None))]
    assert next(inputs) == "show tables"


def test_shell_exits_on_eof(monkeypatch, patched_client) -> None:
    def _eof(self, prompt="odps> "):
        raise EOFError

    monkeypatch.setattr(Renderer, "get_user_input", _eof)

    result = CliRunner().invoke(cli_app_module.app, ["shell"])

    assert result.exit_code == 0
    assert "Goodbye!" in result.output


class _JsonResponse:
    def __init__(self, payload, status_code=200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.text = ""
        self.reason = ""

    def json(self):
        return self.payload


class _StaticSession:
    def __init__(self, payload) -> None:
        self.payload = payload
        self.headers = {}
        self.auth = None

    def get(self, url, *, params=None, timeout):
        return _JsonResponse(self.payload)

    def close(self) -> None:
        pass


def test_shell_survives_malformed_service_payload(monkeypatch) -> None:
    session = _StaticSession({"name": "m"})
    monkeypatch.setattr(
        cli_app_module,
        "build_client",
        lambda settings: RestServiceClient("https://service.example.com", session=session),
    )
    inputs = iter(["desc onlinemodel p.m", "quit"])
    monkeypatch.setattr(Renderer, "get_user_input", lambda self, prompt="odps> ": next(inputs))

    result = CliRunner().invoke(cli_app_module.app, ["shell"])

    assert result.exit_code == 0
    assert "Unexpected OnlineModel payload" in result.output
    assert "Goodbye!" in result.output


def test_shell_help_reports_unknown_keyword(monkeypatch, patched_client) -> None:
    inputs = iter(["help partition", "quit"])
    monkeypatch.setattr(Renderer, "get_user_input", lambda self, prompt="odps> ": next(inputs))

    result = CliRunner().invoke(cli_app_module.app, ["shell"])

    assert result.exit_code == 0
    assert "No command matches: partition" in result.output


def test_run_rejects_unknown_log_level(monkeypatch, patched_client) -> None:
    monkeypatch.setenv("ODPS_LOG_LEVEL", "LOUD")

    result = CliRunner().invoke(cli_app_module.app, ["run", "show tables in proj1"])

    assert result.exit_code == 1
    assert "Unknown log level: LOUD" in result.output
    assert patched_client == []
