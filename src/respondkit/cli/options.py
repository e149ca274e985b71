from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from respondkit.errors.base import RespondError


@dataclass(frozen=True)
class CommonOptions:
    positionals: tuple[str, ...]
    config_path: Path | None = None
    json_mode: bool = False
    body: str | None = None


def parse_common_options(args: list[str]) -> CommonOptions:
    positionals: list[str] = []
    config_path: Path | None = None
    json_mode = False
    body: str | None = None
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--json":
            json_mode = True
        elif arg == "--config":
            if index + 1 >= len(args):
                raise RespondError("--config requires a path")
            config_path = Path(args[index + 1])
            index += 1
        elif arg.startswith("--config="):
            config_path = Path(arg.split("=", 1)[1])
        elif arg == "--body":
            if index + 1 >= len(args):
                raise RespondError("--body requires a value")
            body = args[index + 1]
            index += 1
        elif arg.startswith("--"):
            raise RespondError(f"Unknown flag: {arg}")
        else:
            positionals.append(arg)
        index += 1
    return CommonOptions(positionals=tuple(positionals), config_path=config_path, json_mode=json_mode, body=body)


__all__ = ["CommonOptions", "parse_common_options"]
