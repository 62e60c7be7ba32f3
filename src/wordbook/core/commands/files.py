"""
Dictionary lifecycle: create, open, save, close.
"""

from wordbook.core.commands import CommandResult, ok, register_command, soft_fail
from wordbook.core.dictionary import Dictionary
from wordbook.core.errors import FormatError, IOFailure, MalformedArgument
from wordbook.core.session import Session
from wordbook.logs import get_logger


logger = get_logger(__name__)


@register_command("create")
def create(session: Session, arg: str) -> CommandResult:
    """New empty dictionary. Replaces the open one without saving it."""
    if not arg:
        raise MalformedArgument("No dictionary name specified!")
    session.replace_dictionary(Dictionary(arg))
    return ok(f'Created a new dictionary named "{arg}"')


@register_command("open")
def open_(session: Session, arg: str) -> CommandResult:
    if not arg:
        raise MalformedArgument("No path specified!")
    try:
        dictionary = Dictionary.load(arg)
    except (OSError, FormatError) as e:
        logger.warning(f"Could not open {arg!r}: {e}")
        raise IOFailure(f'Problem opening dictionary at "{arg}"') from e

    session.replace_dictionary(dictionary)
    session.path = arg
    return ok(f'Opened "{dictionary.name}"')


@register_command("save")
def save(session: Session, arg: str) -> CommandResult:
    """Save to the given path, or to the last path used."""
    dictionary = session.require_dictionary()
    path = arg or session.path
    if not path:
        raise MalformedArgument("No path specified!")
    try:
        dictionary.save(path)
    except OSError as e:
        logger.warning(f"Could not save to {path!r}: {e}")
        raise IOFailure(f'Problem saving dictionary to "{path}"') from e

    session.path = path
    return ok(f'Saved "{dictionary.name}" to "{path}"')


@register_command("close")
def close(session: Session, arg: str) -> CommandResult:
    if session.dictionary is None:
        return soft_fail("No dictionary is open")
    name = session.dictionary.name
    session.replace_dictionary(None)
    return ok(f'Closed "{name}"')
