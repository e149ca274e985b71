from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from respondkit.errors.base import RespondError
from respondkit.errors.guidance import build_guidance_message


DEFAULT_UNIT = "px"
DEFAULT_BREAKPOINTS: tuple[tuple[str, int], ...] = (
    ("xs", 0),
    ("sm", 576),
    ("md", 768),
    ("lg", 992),
    ("xl", 1200),
    ("xxl", 1400),
)

_NAME = re.compile(r"^\S+$")
_UNIT = re.compile(r"^[a-z]+$")


@dataclass(frozen=True)
class BreakpointTable:
    """Ordered, immutable name -> width table.

    Widths are non-decreasing in table order. Lookups return the stored value,
    never a membership flag, so callers can derive boundaries from the result.
    """

    names: tuple[str, ...]
    values: tuple[int, ...]
    unit: str = DEFAULT_UNIT

    def lookup(self, name: str) -> int | None:
        try:
            index = self.names.index(name)
        except ValueError:
            return None
        return self.values[index]

    def next_name(self, name: str) -> str | None:
        if name not in self.names:
            return None
        index = self.names.index(name) + 1
        if index >= len(self.names):
            return None
        return self.names[index]

    def items(self) -> tuple[tuple[str, int], ...]:
        return tuple(zip(self.names, self.values))

    def as_dict(self) -> dict[str, int]:
        return dict(self.items())

    def classify(self, width: int) -> str:
        """Return the breakpoint whose tier contains ``width``.

        Tiers are inclusive on the lower bound and exclusive on the upper
        bound; the last tier is open ended.
        """
        if width < 0:
            raise ValueError("Width must be non-negative")
        current = self.names[0]
        for name, value in self.items():
            if width >= value:
                current = name
            else:
                break
        return current

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


def default_breakpoint_table() -> BreakpointTable:
    return build_breakpoint_table(DEFAULT_BREAKPOINTS)


def build_breakpoint_table(
    entries: Mapping[str, object] | Iterable[tuple[str, object]],
    *,
    unit: str = DEFAULT_UNIT,
) -> BreakpointTable:
    if isinstance(entries, Mapping):
        pairs = list(entries.items())
    else:
        pairs = list(entries)
    if not pairs:
        raise RespondError(
            build_guidance_message(
                what="Breakpoint table is empty.",
                why="At least one breakpoint is required to build media queries.",
                fix="Add breakpoints to the [breakpoints] table.",
                example="[breakpoints]\\nxs = 0\\nsm = 576",
            )
        )
    normalized_unit = _normalize_unit(unit)

    names: list[str] = []
    values: list[int] = []
    last: int | None = None
    for raw_name, raw_width in pairs:
        name = str(raw_name or "").strip()
        if not name:
            raise RespondError("Breakpoint name cannot be empty.")
        if not _NAME.match(name):
            raise RespondError(
                f"Invalid breakpoint name '{name}'. Names cannot contain whitespace."
            )
        if name in names:
            raise RespondError(f"Breakpoint '{name}' is declared more than once.")
        width = _coerce_width(name, raw_width)
        if last is not None and width < last:
            raise RespondError(
                build_guidance_message(
                    what=f"Breakpoint '{name}' ({width}) is smaller than the breakpoint before it ({last}).",
                    why="Breakpoints must be ordered from smallest to largest width.",
                    fix="Reorder the breakpoints or correct the width.",
                    example="[breakpoints]\\nsm = 576\\nmd = 768",
                )
            )
        names.append(name)
        values.append(width)
        last = width

    return BreakpointTable(names=tuple(names), values=tuple(values), unit=normalized_unit)


def _coerce_width(name: str, value: object) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise RespondError(f"Breakpoint '{name}' width must be an integer.")
    if value < 0:
        raise RespondError(f"Breakpoint '{name}' width cannot be negative.")
    return value


def _normalize_unit(unit: str) -> str:
    text = str(unit or "").strip().lower()
    if not _UNIT.match(text):
        raise RespondError(
            build_guidance_message(
                what=f"Invalid length unit '{unit}'.",
                why="Units are written as lowercase letters, for example px or em.",
                fix="Set a plain CSS length unit.",
                example='[output]\\nunit = "px"',
            )
        )
    return text


__all__ = [
    "BreakpointTable",
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_UNIT",
    "build_breakpoint_table",
    "default_breakpoint_table",
]
