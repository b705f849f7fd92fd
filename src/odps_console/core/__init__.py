"""Command parsing and execution."""

from .executor import CommandExecutor
from .matcher import CommandMatcher
from .types import CommandKind, MatchedCommand, ParsedCommand

__all__ = ["CommandExecutor", "CommandKind", "CommandMatcher", "MatchedCommand", "ParsedCommand"]
