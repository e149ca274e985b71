from __future__ import annotations

import json
import os

from respondkit.config.model import AppConfig
from respondkit.errors.base import RespondError
from respondkit.errors.guidance import build_guidance_message


ENV_BREAKPOINTS_JSON = "RESPONDKIT_BREAKPOINTS_JSON"
ENV_UNIT = "RESPONDKIT_UNIT"
ENV_INDENT = "RESPONDKIT_INDENT"


def apply_env_overrides(config: AppConfig) -> bool:
    used = False
    raw = os.getenv(ENV_BREAKPOINTS_JSON)
    if raw:
        config.breakpoints.entries = _parse_breakpoints_json(raw)
        used = True
    unit = os.getenv(ENV_UNIT)
    if unit:
        config.output.unit = unit
        used = True
    indent = os.getenv(ENV_INDENT)
    if indent:
        try:
            config.output.indent = int(indent)
        except ValueError as err:
            raise RespondError(f"{ENV_INDENT} must be an integer") from err
        if config.output.indent < 0:
            raise RespondError(f"{ENV_INDENT} cannot be negative")
        used = True
    return used


def _parse_breakpoints_json(raw: str) -> tuple[tuple[str, object], ...]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as err:
        raise RespondError(
            build_guidance_message(
                what=f"{ENV_BREAKPOINTS_JSON} is not valid JSON.",
                why=f"JSON parsing failed: {err.msg}.",
                fix="Set it to a JSON object of breakpoint names to widths.",
                example=f'{ENV_BREAKPOINTS_JSON}=\'{{"sm": 576, "md": 768}}\'',
            )
        ) from err
    if not isinstance(data, dict):
        raise RespondError(
            build_guidance_message(
                what=f"{ENV_BREAKPOINTS_JSON} must be a JSON object.",
                why="Breakpoints map a name to a width.",
                fix="Use an object, not a list or scalar.",
                example=f'{ENV_BREAKPOINTS_JSON}=\'{{"sm": 576, "md": 768}}\'',
            )
        )
    return tuple(data.items())


__all__ = ["ENV_BREAKPOINTS_JSON", "ENV_INDENT", "ENV_UNIT", "apply_env_overrides"]
