from __future__ import annotations

import sys
from pathlib import Path

from respondkit.cli.query_mode import run_query_command
from respondkit.cli.table_mode import run_classify_command, run_table_command
from respondkit.errors.base import RespondError
from respondkit.errors.render import format_error
from respondkit.version import get_version

QUERY_COMMANDS = {"above", "below", "between", "only"}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            _print_usage()
            return 1

        cmd = args[0]
        if cmd == "--version":
            print(f"respondkit {get_version()}")
            return 0
        if cmd in {"--help", "-h", "help"}:
            _print_usage()
            return 0
        if cmd in QUERY_COMMANDS:
            return run_query_command(cmd, args[1:])
        if cmd == "table":
            return run_table_command(args[1:])
        if cmd == "classify":
            return run_classify_command(args[1:])
        print(f"Unknown command: {cmd}", file=sys.stderr)
        _print_usage()
        return 1
    except RespondError as err:
        print(format_error(err, _error_source(err)), file=sys.stderr)
        return 1


def _error_source(err: RespondError) -> str | None:
    file_path = err.details.get("file")
    if not file_path:
        return None
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except OSError:
        return None


def _print_usage() -> None:
    usage = """Usage:
  respondkit above <name>             # @media (min-width: <name>)
  respondkit below <name>             # @media (max-width: <name> - 1)
  respondkit between <lower> <upper>  # both bounds
  respondkit only <name>              # the tier of <name> up to the next breakpoint
  respondkit table                    # list active breakpoints
  respondkit classify <width>         # breakpoint containing a width
  respondkit --version
  respondkit help                     # this help
  Flags: --config <respondkit.toml>  --body <css>  --json
"""
    print(usage.strip())


if __name__ == "__main__":
    sys.exit(main())
