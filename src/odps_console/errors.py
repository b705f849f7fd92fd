"""Application-level exception types for the console."""

from __future__ import annotations

BAD_COMMAND = "Bad command: "


class ConsoleError(Exception):
    """Base exception for the console."""


class ConfigurationError(ConsoleError):
    """Raised when settings needed to reach the service are missing."""


class BadCommandError(ConsoleError):
    """Raised when text matches a grammar but breaks its parameter rules."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{BAD_COMMAND}{detail}")
        self.detail = detail


class MissingArgumentError(BadCommandError):
    """Raised when an option is given without its value."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Missing argument for option: {option}")
        self.option = option


class InvalidParameterError(BadCommandError):
    """Raised for unsupported options or unexpected arguments."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid parameter: {token}")
        self.token = token


class ProjectConflictError(BadCommandError):
    """Raised when two project sources disagree."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"Project name conflict: {first} != {second}")
        self.first = first
        self.second = second


class NotFoundError(ConsoleError):
    """Raised when the requested object does not exist in its project."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} not found: {name}")
        self.kind = kind
        self.name = name


class ServiceError(ConsoleError):
    """Raised when the remote service answers with an error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Service error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class InvalidResponseError(ServiceError):
    """Raised when a successful response carries an unusable payload."""
