"""
wordbook CLI.
"""

import argparse
import sys

from wordbook.cli.commands import script, shell
from wordbook.config import Settings
from wordbook.logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordbook", description="Personal dictionary manager")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--dates", action="store_true", help="Start with date arguments enabled")
    parser.add_argument("--open", dest="open_path", help="Open a dictionary file first")
    subparsers = parser.add_subparsers(dest="command")

    shell.add_subparser(subparsers)
    script.add_subparser(subparsers)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(args.log_level or settings.log_level, args.log_file or settings.log_file)
    args.dates = args.dates or settings.dates_enabled

    func = getattr(args, "func", shell.run_shell)
    return func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
