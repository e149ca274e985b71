from __future__ import annotations

from .conditions import ConditionalBlock, MediaCondition, render_blocks
from .intent import Above, Below, Between, Only, QueryIntent
from .resolver import BreakpointResolver
from .table import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_UNIT,
    BreakpointTable,
    build_breakpoint_table,
    default_breakpoint_table,
)

__all__ = [
    "Above",
    "Below",
    "Between",
    "BreakpointResolver",
    "BreakpointTable",
    "ConditionalBlock",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_UNIT",
    "MediaCondition",
    "Only",
    "QueryIntent",
    "build_breakpoint_table",
    "default_breakpoint_table",
    "render_blocks",
]
