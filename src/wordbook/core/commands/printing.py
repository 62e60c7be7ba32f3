"""
Printouts and statistics, with new/current caching.

"new" regenerates the cached value; "current" reuses it, generating it first
if there is none. Cached values are not refreshed when the dictionary changes,
but create, open and close drop them along with the dictionary they describe.
"""

from pathlib import Path

from wordbook.config import (
    HISTOGRAM_DPI,
    HISTOGRAM_FILENAME,
    STATS_FILENAME,
    TRIMMED_HISTOGRAM_FILENAME,
)
from wordbook.core.commands import CommandResult, ok, register_command
from wordbook.core.errors import IOFailure, InvalidVersionArgument, MalformedArgument
from wordbook.core.session import Session
from wordbook.logs import get_logger
from wordbook.stats.histogram import Histogram
from wordbook.stats.statistics import Statistics


logger = get_logger(__name__)

VERSIONS = ("new", "current")


def _check_version(arg: str) -> str:
    version = arg.strip().lower()
    if version not in VERSIONS:
        raise InvalidVersionArgument(arg)
    return version


def refresh_printout(session: Session) -> str:
    session.printout = session.require_dictionary().render()
    return session.printout


def refresh_statistics(session: Session) -> Statistics:
    session.statistics = Statistics.from_dictionary(session.require_dictionary())
    return session.statistics


@register_command("print")
def print_(session: Session, arg: str) -> CommandResult:
    session.require_dictionary()
    version = _check_version(arg)
    if version == "new" or session.printout is None:
        refresh_printout(session)
    return ok(session.printout)


@register_command("printto")
def print_to(session: Session, arg: str) -> CommandResult:
    """Write a fresh printout to a text file."""
    dictionary = session.require_dictionary()
    if not arg:
        raise MalformedArgument("No path specified!")

    text = refresh_printout(session)
    try:
        Path(arg).write_text(text, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not write printout to {arg!r}: {e}")
        raise IOFailure(f'Problem printing dictionary to "{arg}"') from e
    return ok(f'Printed "{dictionary.name}" to "{arg}"')


@register_command("printstats")
def print_stats(session: Session, arg: str) -> CommandResult:
    session.require_dictionary()
    version = _check_version(arg)
    if version == "new" or session.statistics is None:
        refresh_statistics(session)
    return ok(session.statistics.render())


@register_command("statsdump")
def stats_dump(session: Session, arg: str) -> CommandResult:
    """Write stats.txt and both histograms into a directory."""
    session.require_dictionary()
    if not arg:
        raise MalformedArgument("No directory specified!")

    statistics = refresh_statistics(session)
    directory = Path(arg)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / STATS_FILENAME).write_text(statistics.render(), encoding="utf-8")
        Histogram(statistics.time_differences).save(directory / HISTOGRAM_FILENAME, dpi=HISTOGRAM_DPI)
        Histogram(statistics.trimmed_time_differences).save(
            directory / TRIMMED_HISTOGRAM_FILENAME, dpi=HISTOGRAM_DPI
        )
    except OSError as e:
        logger.warning(f"Could not write statistics to {arg!r}: {e}")
        raise IOFailure(f'Problem saving statistics to "{arg}"') from e
    return ok(f'Saved statistics to "{arg}"')
