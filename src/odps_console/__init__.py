"""odps-console - command console for projects, tables and online models."""

from .core import CommandExecutor, CommandKind, CommandMatcher, ParsedCommand
from .session import SessionContext

__version__ = "0.1.0"

__all__ = ["CommandExecutor", "CommandKind", "CommandMatcher", "ParsedCommand", "SessionContext"]
