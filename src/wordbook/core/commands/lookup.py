"""
Reading the dictionary: find, remove, search.
"""

import re

from wordbook.core.commands import CommandResult, ok, register_command, soft_fail
from wordbook.core.dates import format_date
from wordbook.core.errors import MalformedArgument, NotFound
from wordbook.core.search import format_results, relevant_results
from wordbook.core.session import Session


@register_command("find")
def find(session: Session, arg: str) -> CommandResult:
    dictionary = session.require_dictionary()
    definition = dictionary.lookup(arg)
    if definition is None:
        raise NotFound(arg)
    return ok(f"{arg}:\t{definition.read()}\nEntered on {format_date(definition.entry_date)}")


@register_command("remove")
def remove(session: Session, arg: str) -> CommandResult:
    dictionary = session.require_dictionary()
    if dictionary.remove(arg):
        return ok(f'Removed the definition for "{arg}"')
    return soft_fail(f'No definition exists for "{arg}"')


@register_command("search")
def search(session: Session, arg: str) -> CommandResult:
    """Regex search; lists entries with at least one match, best first."""
    dictionary = session.require_dictionary()
    if not arg:
        raise MalformedArgument("No search term specified!")
    try:
        pattern = re.compile(arg)
    except re.error as e:
        raise MalformedArgument(f'Invalid search pattern "{arg}": {e}')

    results = relevant_results(dictionary.search_all(pattern))
    if not results:
        return soft_fail("No results")
    return ok(format_results(results))
