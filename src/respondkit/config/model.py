from __future__ import annotations

from dataclasses import dataclass, field

from respondkit.breakpoints.table import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_UNIT,
    BreakpointTable,
    build_breakpoint_table,
)


@dataclass
class BreakpointsConfig:
    entries: tuple[tuple[str, object], ...] = DEFAULT_BREAKPOINTS


@dataclass
class OutputConfig:
    unit: str = DEFAULT_UNIT
    indent: int = 2


@dataclass
class AppConfig:
    breakpoints: BreakpointsConfig = field(default_factory=BreakpointsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def breakpoint_table(self) -> BreakpointTable:
        return build_breakpoint_table(self.breakpoints.entries, unit=self.output.unit)


__all__ = ["AppConfig", "BreakpointsConfig", "OutputConfig"]
