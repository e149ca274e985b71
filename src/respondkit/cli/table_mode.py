from __future__ import annotations

from pathlib import Path

from respondkit.cli.options import parse_common_options
from respondkit.config.loader import load_config
from respondkit.errors.base import RespondError
from respondkit.utils.json_tools import dumps_pretty


def run_table_command(args: list[str]) -> int:
    options = parse_common_options(args)
    if options.positionals:
        print("Usage: respondkit table [--config PATH] [--json]")
        return 1
    table = load_config(root=Path.cwd(), path=options.config_path).breakpoint_table()
    if options.json_mode:
        payload = {
            "unit": table.unit,
            "breakpoints": [{"name": name, "width": width} for name, width in table.items()],
        }
        print(dumps_pretty(payload))
        return 0
    width = max(len(name) for name in table.names)
    lines = [f"{name.ljust(width)}  {value}{table.unit}" for name, value in table.items()]
    print("\n".join(lines))
    return 0


def run_classify_command(args: list[str]) -> int:
    options = parse_common_options(args)
    if len(options.positionals) != 1:
        print("Usage: respondkit classify <width> [--config PATH] [--json]")
        return 1
    raw = options.positionals[0]
    try:
        width = int(raw)
    except ValueError as err:
        raise RespondError(f"Width must be an integer, got '{raw}'.") from err
    if width < 0:
        raise RespondError("Width must be non-negative.")
    table = load_config(root=Path.cwd(), path=options.config_path).breakpoint_table()
    name = table.classify(width)
    if options.json_mode:
        print(dumps_pretty({"width": width, "breakpoint": name}))
    else:
        print(name)
    return 0


__all__ = ["run_classify_command", "run_table_command"]
