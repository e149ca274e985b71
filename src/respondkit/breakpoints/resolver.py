"""Breakpoint resolver.

Turns breakpoint names into guarded conditional blocks. Unknown names never
raise: the block is dropped and a warning diagnostic is reported, so the rest
of the stylesheet keeps generating.
"""

from __future__ import annotations

from typing import Callable, Union

from respondkit.breakpoints.conditions import ConditionalBlock, MediaCondition
from respondkit.breakpoints.intent import Above, Below, Between, Only, QueryIntent
from respondkit.breakpoints.table import BreakpointTable, default_breakpoint_table
from respondkit.diagnostics import (
    Diagnostic,
    Reporter,
    empty_below,
    empty_range,
    unknown_breakpoint,
    unknown_lower_breakpoint,
    unknown_upper_breakpoint,
)


Content = Union[str, Callable[[], str]]


class BreakpointResolver:
    """Builds conditional blocks from breakpoint names.

    Unknown names and unmatchable guards are reported through ``warnings``
    and the optional ``reporter``. Content is produced only for blocks whose
    guard can match some width.
    """

    def __init__(self, table: BreakpointTable | None = None, *, reporter: Reporter | None = None) -> None:
        self.table = table if table is not None else default_breakpoint_table()
        self.reporter = reporter

    def respond_above(self, name: str, content: Content = "", *, warnings: list | None = None) -> ConditionalBlock | None:
        value = self.table.lookup(name)
        if value is None:
            self._report(unknown_breakpoint(name), warnings)
            return None
        return self._block(MediaCondition(min_width=value, unit=self.table.unit), content, warnings)

    def respond_below(self, name: str, content: Content = "", *, warnings: list | None = None) -> ConditionalBlock | None:
        value = self.table.lookup(name)
        if value is None:
            self._report(unknown_breakpoint(name), warnings)
            return None
        condition = MediaCondition(max_width=value - 1, unit=self.table.unit)
        return self._block(condition, content, warnings, empty=empty_below(name, value))

    def respond_between(
        self,
        lower: str,
        upper: str,
        content: Content = "",
        *,
        warnings: list | None = None,
    ) -> ConditionalBlock | None:
        lower_value = self.table.lookup(lower)
        upper_value = self.table.lookup(upper)
        if lower_value is None:
            self._report(unknown_lower_breakpoint(lower), warnings)
        if upper_value is None:
            self._report(unknown_upper_breakpoint(upper), warnings)
        if lower_value is None or upper_value is None:
            return None
        # Arguments are never reordered.
        condition = MediaCondition(min_width=lower_value, max_width=upper_value - 1, unit=self.table.unit)
        return self._block(condition, content, warnings, empty=empty_range(lower, lower_value, upper, upper_value))

    def respond_only(self, name: str, content: Content = "", *, warnings: list | None = None) -> ConditionalBlock | None:
        value = self.table.lookup(name)
        if value is None:
            self._report(unknown_breakpoint(name), warnings)
            return None
        following = self.table.next_name(name)
        if following is None:
            return self._block(MediaCondition(min_width=value, unit=self.table.unit), content, warnings)
        upper_value = self.table.lookup(following)
        condition = MediaCondition(min_width=value, max_width=upper_value - 1, unit=self.table.unit)
        return self._block(condition, content, warnings, empty=empty_range(name, value, following, upper_value))

    def resolve(self, intent: QueryIntent, content: Content = "", *, warnings: list | None = None) -> ConditionalBlock | None:
        if isinstance(intent, Above):
            return self.respond_above(intent.name, content, warnings=warnings)
        if isinstance(intent, Below):
            return self.respond_below(intent.name, content, warnings=warnings)
        if isinstance(intent, Between):
            return self.respond_between(intent.lower, intent.upper, content, warnings=warnings)
        if isinstance(intent, Only):
            return self.respond_only(intent.name, content, warnings=warnings)
        raise TypeError(f"Unsupported query intent: {type(intent).__name__}")

    def _block(
        self,
        condition: MediaCondition,
        content: Content,
        warnings: list | None,
        *,
        empty: Diagnostic | None = None,
    ) -> ConditionalBlock:
        if condition.is_empty:
            # Guard matches no width: keep the query, never produce content.
            if empty is not None:
                self._report(empty, warnings)
            return ConditionalBlock(condition=condition, content="")
        text = content() if callable(content) else content
        return ConditionalBlock(condition=condition, content=str(text))

    def _report(self, diagnostic: Diagnostic, warnings: list | None) -> None:
        if warnings is not None:
            warnings.append(diagnostic)
        if self.reporter is not None:
            self.reporter(diagnostic)


__all__ = ["BreakpointResolver", "Content"]
