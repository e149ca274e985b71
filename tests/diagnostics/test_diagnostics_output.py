from __future__ import annotations

from respondkit.diagnostics import (
    format_diagnostic,
    print_diagnostic,
    unknown_breakpoint,
    unknown_lower_breakpoint,
    unknown_upper_breakpoint,
)


def test_diagnostic_messages() -> None:
    assert unknown_breakpoint("foo").message == "Invalid breakpoint: foo"
    assert unknown_lower_breakpoint("foo").message == "Invalid lower breakpoint: foo"
    assert unknown_upper_breakpoint("bar").message == "Invalid upper breakpoint: bar"


def test_print_diagnostic_writes_to_stderr(capsys) -> None:
    print_diagnostic(unknown_breakpoint("foo"))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "warning: Invalid breakpoint: foo"


def test_to_dict_is_stable() -> None:
    diagnostic = unknown_breakpoint("foo")
    assert diagnostic.to_dict() == {
        "code": "breakpoint.unknown",
        "message": "Invalid breakpoint: foo",
        "breakpoint": "foo",
        "severity": "warning",
    }
    assert format_diagnostic(diagnostic) == "warning: Invalid breakpoint: foo"
