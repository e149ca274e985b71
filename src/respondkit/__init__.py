"""
respondkit: media-query helpers driven by a named breakpoint table.
"""

__all__ = ["BreakpointResolver", "BreakpointTable", "build_breakpoint_table", "load_config"]


def __getattr__(name: str):
    if name == "BreakpointResolver":
        from respondkit.breakpoints.resolver import BreakpointResolver

        return BreakpointResolver
    if name == "BreakpointTable":
        from respondkit.breakpoints.table import BreakpointTable

        return BreakpointTable
    if name == "build_breakpoint_table":
        from respondkit.breakpoints.table import build_breakpoint_table

        return build_breakpoint_table
    if name == "load_config":
        from respondkit.config.loader import load_config

        return load_config
    raise AttributeError(f"module 'respondkit' has no attribute {name!r}")
