from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable


UNKNOWN_BREAKPOINT = "breakpoint.unknown"
UNKNOWN_LOWER_BREAKPOINT = "breakpoint.unknown_lower"
UNKNOWN_UPPER_BREAKPOINT = "breakpoint.unknown_upper"
EMPTY_RANGE = "breakpoint.empty_range"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    breakpoint: str | None = None
    severity: str = "warning"

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "breakpoint": self.breakpoint,
            "severity": self.severity,
        }


Reporter = Callable[[Diagnostic], None]


def unknown_breakpoint(name: str) -> Diagnostic:
    return Diagnostic(code=UNKNOWN_BREAKPOINT, message=f"Invalid breakpoint: {name}", breakpoint=name)


def unknown_lower_breakpoint(name: str) -> Diagnostic:
    return Diagnostic(code=UNKNOWN_LOWER_BREAKPOINT, message=f"Invalid lower breakpoint: {name}", breakpoint=name)


def unknown_upper_breakpoint(name: str) -> Diagnostic:
    return Diagnostic(code=UNKNOWN_UPPER_BREAKPOINT, message=f"Invalid upper breakpoint: {name}", breakpoint=name)


def empty_range(lower: str, lower_value: int, upper: str, upper_value: int) -> Diagnostic:
    return Diagnostic(
        code=EMPTY_RANGE,
        message=f"Empty breakpoint range: {lower} ({lower_value}) to {upper} ({upper_value})",
        breakpoint=f"{lower}..{upper}",
    )


def empty_below(name: str, value: int) -> Diagnostic:
    return Diagnostic(
        code=EMPTY_RANGE,
        message=f"Empty breakpoint range: below {name} ({value})",
        breakpoint=name,
    )


def format_diagnostic(diagnostic: Diagnostic) -> str:
    return f"{diagnostic.severity}: {diagnostic.message}"


def print_diagnostic(diagnostic: Diagnostic) -> None:
    print(format_diagnostic(diagnostic), file=sys.stderr)


__all__ = [
    "Diagnostic",
    "EMPTY_RANGE",
    "Reporter",
    "UNKNOWN_BREAKPOINT",
    "UNKNOWN_LOWER_BREAKPOINT",
    "UNKNOWN_UPPER_BREAKPOINT",
    "empty_below",
    "empty_range",
    "format_diagnostic",
    "print_diagnostic",
    "unknown_breakpoint",
    "unknown_lower_breakpoint",
    "unknown_upper_breakpoint",
]
