"""
Interactive command loop.
"""

import sys

from rich.console import Console

from wordbook.config import PROMPT, QUIT_COMMAND
from wordbook.core.commands import CommandResult
from wordbook.core.router import ERROR_PREFIX, Router
from wordbook.core.session import Session


def add_subparser(subparsers):
    parser = subparsers.add_parser("shell", help="Read commands from standard input (default)")
    parser.set_defaults(func=run_shell)


def make_router(args, console: Console) -> Router:
    """Router for a new session, honouring --dates and --open."""
    router = Router(Session(dates_enabled=getattr(args, "dates", False)))
    open_path = getattr(args, "open_path", None)
    if open_path:
        print_result(console, router.dispatch(f"open {open_path}"))
    return router


def print_result(console: Console, result: CommandResult) -> None:
    style = "red" if result.message.startswith(ERROR_PREFIX) else None
    console.print(result.message, style=style, markup=False, highlight=False, soft_wrap=True)


def is_quit(line: str) -> bool:
    return line.strip().lower() == QUIT_COMMAND


def repl(router: Router, stdin, console: Console) -> int:
    while True:
        console.print()
        console.print(PROMPT, markup=False, highlight=False)

        line = stdin.readline()
        if not line:
            return 0
        line = line.rstrip("\r\n")

        if is_quit(line):
            console.print("Quitting...")
            return 0

        print_result(console, router.dispatch(line))


def run_shell(args, stdin=None, console: Console | None = None) -> int:
    console = console or Console()
    router = make_router(args, console)
    return repl(router, stdin or sys.stdin, console)
