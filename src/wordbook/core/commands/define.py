"""
Defining words and correcting entry dates.

Define arguments:

    "word" definition text
    "word" "MM:dd:yyyy:HH:mm" definition text     (date arguments enabled)
"""

import re
from dataclasses import dataclass
from datetime import datetime

from wordbook.config import DATE_ARG_PATTERN
from wordbook.core.commands import CommandResult, ok, register_command, soft_fail
from wordbook.core.dates import format_date, parse_date_arg
from wordbook.core.definition import Definition
from wordbook.core.errors import MalformedArgument
from wordbook.core.session import Session


WORD_PATTERN = re.compile(r'"([^"]*)"\s')
DATE_PATTERN = re.compile(r'\s*"([^"]*)"')


@dataclass
class DefineArgs:
    word: str
    entry_date: datetime
    text: str


def parse_define_arg(arg: str, dates_enabled: bool, now: datetime | None = None) -> DefineArgs:
    match = WORD_PATTERN.search(arg)
    if not match or not match.group(1):
        raise MalformedArgument("Malformed definition argument!")
    word = match.group(1)
    rest = arg[match.end():]

    if dates_enabled:
        date_match = DATE_PATTERN.match(rest)
        if not date_match:
            raise MalformedArgument(
                f'Missing date argument! Expected "{DATE_ARG_PATTERN}" after the word'
            )
        entry_date = parse_date_arg(date_match.group(1))
        rest = rest[date_match.end():]
    else:
        entry_date = now or datetime.now()

    text = rest.strip()
    if not text:
        raise MalformedArgument("Malformed definition argument!")

    return DefineArgs(word, entry_date, text)


@register_command("weakdefine")
def weak_define(session: Session, arg: str) -> CommandResult:
    """Add a definition only if the word is not defined yet."""
    dictionary = session.require_dictionary()
    args = parse_define_arg(arg, session.dates_enabled)

    if dictionary.weak_define(args.word, Definition(args.text, args.entry_date)):
        return ok(f'Added a definition for "{args.word}"')
    return soft_fail(f'A definition already exists for "{args.word}"')


@register_command("strongdefine")
def strong_define(session: Session, arg: str) -> CommandResult:
    """Add a definition, replacing any existing one."""
    dictionary = session.require_dictionary()
    args = parse_define_arg(arg, session.dates_enabled)

    if dictionary.strong_define(args.word, Definition(args.text, args.entry_date)):
        return ok(f'Updated the definition for "{args.word}"')
    return ok(f'Added a definition for "{args.word}"')


@register_command("changedate")
def change_date(session: Session, arg: str) -> CommandResult:
    """changedate MM:dd:yyyy:HH:mm word"""
    dictionary = session.require_dictionary()

    date_text, _, word = arg.strip().partition(" ")
    word = word.strip()
    if not date_text or not word:
        raise MalformedArgument(f"Expected a {DATE_ARG_PATTERN} date followed by a word!")

    new_date = parse_date_arg(date_text)
    old_date = dictionary.change_entry_date(word, new_date)
    return ok(
        f'Changed the entry date of "{word}" from {format_date(old_date)} to {format_date(new_date)}'
    )


@register_command("enabledates")
def enable_dates(session: Session, arg: str) -> CommandResult:
    session.dates_enabled = True
    return ok("Date arguments enabled")


@register_command("disabledates")
def disable_dates(session: Session, arg: str) -> CommandResult:
    session.dates_enabled = False
    return ok("Date arguments disabled")
