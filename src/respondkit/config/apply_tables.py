from __future__ import annotations

from typing import Any, Dict

from respondkit.config.model import AppConfig
from respondkit.errors.base import RespondError
from respondkit.errors.guidance import build_guidance_message


def _apply_toml_config(config: AppConfig, data: Dict[str, Any]) -> None:
    if not isinstance(data, dict):
        return
    _apply_breakpoints_toml(config, data.get("breakpoints"))
    _apply_output_toml(config, data.get("output"))


def _apply_breakpoints_toml(config: AppConfig, table: Any) -> None:
    if table is None:
        return
    if not isinstance(table, dict):
        raise RespondError(
            build_guidance_message(
                what="breakpoints must be a table.",
                why="Breakpoints map a name to a width.",
                fix="Declare a [breakpoints] table with name = width entries.",
                example="[breakpoints]\\nxs = 0\\nsm = 576",
            )
        )
    # Replaces the default table wholesale; validation happens when the table is built.
    config.breakpoints.entries = tuple(table.items())


def _apply_output_toml(config: AppConfig, table: Any) -> None:
    if not isinstance(table, dict):
        return
    unit = table.get("unit")
    if unit is not None:
        config.output.unit = str(unit)
    indent = table.get("indent")
    if indent is not None:
        if isinstance(indent, bool):
            raise RespondError("output.indent must be an integer")
        try:
            config.output.indent = int(indent)
        except (TypeError, ValueError) as err:
            raise RespondError("output.indent must be an integer") from err
        if config.output.indent < 0:
            raise RespondError("output.indent cannot be negative")


__all__ = ["_apply_toml_config"]
