# src/wordbook/core/commands/__init__.py
"""
Command registry.

Each command:
  - Is registered under a lower-case keyword
  - Is a plain function (session, argument) -> CommandResult
  - Raises a WordbookError for anything the user should see as "ERROR: ..."
"""

from dataclasses import dataclass
from typing import Callable

from wordbook.core.errors import InvalidCommand
from wordbook.core.session import Session


@dataclass
class CommandResult:
    success: bool
    message: str = ""


Handler = Callable[[Session, str], CommandResult]


# Command registry
COMMANDS: dict[str, Handler] = {}


def register_command(keyword: str) -> Callable[[Handler], Handler]:
    """Register a handler function under a keyword."""
    def decorator(func: Handler) -> Handler:
        COMMANDS[keyword] = func
        return func
    return decorator


def get_command(keyword: str) -> Handler:
    if keyword not in COMMANDS:
        raise InvalidCommand(keyword)
    return COMMANDS[keyword]


def list_commands() -> list[str]:
    return list(COMMANDS.keys())


def ok(message: str) -> CommandResult:
    return CommandResult(True, message)


def soft_fail(message: str) -> CommandResult:
    """A failed outcome that is not reported as an error."""
    return CommandResult(False, message)
