"""
Command router: one input line in, one result string out.

    "strongdefine \"cat\" a feline"  ->  keyword "strongdefine", argument "\"cat\" a feline"
"""

from wordbook.core.commands import CommandResult, get_command
from wordbook.core.errors import IOFailure, WordbookError
from wordbook.core.session import Session
from wordbook.logs import get_logger

# Import command modules to register them
import wordbook.core.commands.define
import wordbook.core.commands.files
import wordbook.core.commands.lookup
import wordbook.core.commands.printing


logger = get_logger(__name__)

ERROR_PREFIX = "ERROR: "


def split_command(line: str) -> tuple[str, str]:
    """Split a line into (lower-case keyword, raw argument)."""
    line = line.strip()
    keyword, _, arg = line.partition(" ")
    return keyword.lower(), arg


class Router:
    """Dispatches command lines against one session."""

    def __init__(self, session: Session | None = None):
        self.session = session or Session()

    def dispatch(self, line: str) -> CommandResult:
        keyword, arg = split_command(line)
        logger.debug(f"dispatch {keyword!r} arg={arg!r}")

        try:
            handler = get_command(keyword)
            return handler(self.session, arg)
        except WordbookError as e:
            logger.info(f"{keyword}: {e}")
            return CommandResult(False, f"{ERROR_PREFIX}{e}")
        except OSError as e:
            logger.exception(f"Unexpected I/O failure in {keyword!r}")
            return CommandResult(False, f"{ERROR_PREFIX}{IOFailure(str(e))}")
        except Exception as e:
            logger.exception(f"Unexpected failure in {keyword!r}")
            return CommandResult(False, f"{ERROR_PREFIX}Unexpected error: {e}")

    def receive(self, line: str) -> str:
        return self.dispatch(line).message
