from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any, Dict

from respondkit.errors.base import RespondError
from respondkit.errors.guidance import build_guidance_message

_POSITION = re.compile(r"\(at line (\d+), column (\d+)\)")


def _parse_toml(text: str, path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        line, column = _error_position(str(err))
        raise RespondError(
            build_guidance_message(
                what=f"{path.name} is not valid TOML.",
                why=f"TOML parsing failed: {err}.",
                fix=f"Fix the TOML syntax in {path.name}.",
                example="[breakpoints]\\nsm = 576",
            ),
            line=line,
            column=column,
            details={"file": path.as_posix()},
        ) from err
    return data if isinstance(data, dict) else {}


def _error_position(message: str) -> tuple[int | None, int | None]:
    match = _POSITION.search(message)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


__all__ = ["_parse_toml"]
