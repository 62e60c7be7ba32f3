"""
Run a file of commands, one per line.
"""

from pathlib import Path

from rich.console import Console

from wordbook.cli.commands.shell import is_quit, make_router, print_result
from wordbook.core.router import ERROR_PREFIX


def add_subparser(subparsers):
    parser = subparsers.add_parser("exec", help="Run commands from a file")
    parser.add_argument("script", help="Path to a command file")
    parser.add_argument("--stop-on-error", action="store_true", help="Exit with status 1 at the first error")
    parser.set_defaults(func=run_script)


def run_script(args, console: Console | None = None) -> int:
    console = console or Console()

    path = Path(args.script)
    if not path.exists():
        console.print(f"✗ File not found: {args.script}", style="red", markup=False)
        return 1

    router = make_router(args, console)

    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        if is_quit(line):
            break

        console.print(f"> {line}", style="dim", markup=False, highlight=False, soft_wrap=True)
        result = router.dispatch(line)
        print_result(console, result)

        if args.stop_on_error and result.message.startswith(ERROR_PREFIX):
            return 1

    return 0
