from __future__ import annotations

from pathlib import Path

from respondkit.breakpoints.intent import Above, Below, Between, Only, QueryIntent
from respondkit.breakpoints.resolver import BreakpointResolver
from respondkit.cli.options import parse_common_options
from respondkit.config.loader import load_config
from respondkit.diagnostics import print_diagnostic
from respondkit.utils.json_tools import dumps_pretty

_SINGLE = {"above": Above, "below": Below, "only": Only}
_USAGE = {
    "above": "Usage: respondkit above <name> [--body CSS] [--config PATH] [--json]",
    "below": "Usage: respondkit below <name> [--body CSS] [--config PATH] [--json]",
    "only": "Usage: respondkit only <name> [--body CSS] [--config PATH] [--json]",
    "between": "Usage: respondkit between <lower> <upper> [--body CSS] [--config PATH] [--json]",
}


def run_query_command(command: str, args: list[str]) -> int:
    options = parse_common_options(args)
    intent = _build_intent(command, options.positionals)
    if intent is None:
        print(_USAGE[command])
        return 1
    config = load_config(root=Path.cwd(), path=options.config_path)
    resolver = BreakpointResolver(config.breakpoint_table(), reporter=None if options.json_mode else print_diagnostic)
    warnings: list = []
    block = resolver.resolve(intent, options.body or "", warnings=warnings)
    if options.json_mode:
        payload = {
            "ok": block is not None,
            "block": block.to_dict() if block is not None else None,
            "diagnostics": [item.to_dict() for item in warnings],
        }
        print(dumps_pretty(payload))
    elif block is not None and options.body is not None:
        print(block.render(indent=config.output.indent))
    elif block is not None:
        print(block.condition.query())
    return 0 if block is not None else 1


def _build_intent(command: str, positionals: tuple[str, ...]) -> QueryIntent | None:
    if command == "between":
        if len(positionals) != 2:
            return None
        return Between(lower=positionals[0], upper=positionals[1])
    if len(positionals) != 1:
        return None
    return _SINGLE[command](name=positionals[0])


__all__ = ["run_query_command"]
