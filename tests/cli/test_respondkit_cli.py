from __future__ import annotations

import json

from respondkit.cli.main import main as cli_main


def test_above_prints_media_query(clean_env, capsys):
    rc = cli_main(["above", "sm"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "@media (min-width: 576px)"


def test_below_and_between(clean_env, capsys):
    assert cli_main(["below", "lg"]) == 0
    assert capsys.readouterr().out.strip() == "@media (max-width: 991px)"
    assert cli_main(["between", "sm", "xxl"]) == 0
    assert capsys.readouterr().out.strip() == "@media (min-width: 576px) and (max-width: 1399px)"


def test_only_with_body_renders_block(clean_env, capsys):
    rc = cli_main(["only", "md", "--body", ".grid { gap: 1rem; }"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == (
        "@media (min-width: 768px) and (max-width: 991px) {\n  .grid { gap: 1rem; }\n}"
    )


def test_unknown_breakpoint_warns_on_stderr(clean_env, capsys):
    rc = cli_main(["above", "foo"])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "warning: Invalid breakpoint: foo"


def test_between_unknown_reports_both_sides(clean_env, capsys):
    rc = cli_main(["between", "foo", "bar"])
    assert rc == 1
    err_lines = capsys.readouterr().err.strip().splitlines()
    assert err_lines == [
        "warning: Invalid lower breakpoint: foo",
        "warning: Invalid upper breakpoint: bar",
    ]


def test_json_mode_payload(clean_env, capsys):
    rc = cli_main(["between", "foo", "md", "--json"])
    assert rc == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["block"] is None
    assert [item["message"] for item in payload["diagnostics"]] == ["Invalid lower breakpoint: foo"]


def test_config_flag_swaps_table(clean_env, capsys):
    path = clean_env / "alt.toml"
    path.write_text("[breakpoints]\nphone = 0\ntablet = 600\n\n[output]\nunit = \"em\"\n", encoding="utf-8")
    assert cli_main(["above", "tablet", "--config", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "@media (min-width: 600em)"


def test_project_config_is_picked_up_from_cwd(clean_env, capsys):
    (clean_env / "respondkit.toml").write_text("[breakpoints]\nsmall = 0\nbig = 800\n", encoding="utf-8")
    assert cli_main(["below", "big"]) == 0
    assert capsys.readouterr().out.strip() == "@media (max-width: 799px)"


def test_table_and_classify(clean_env, capsys):
    assert cli_main(["table"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "xs   0px"
    assert lines[-1] == "xxl  1400px"
    assert cli_main(["classify", "800"]) == 0
    assert capsys.readouterr().out.strip() == "md"
    assert cli_main(["table", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["unit"] == "px"
    assert payload["breakpoints"][1] == {"name": "sm", "width": 576}


def test_invalid_config_reports_error(clean_env, capsys):
    (clean_env / "respondkit.toml").write_text("[breakpoints]\nmd = 768\nsm = 576\n", encoding="utf-8")
    rc = cli_main(["above", "sm"])
    assert rc == 1
    err = capsys.readouterr().err
    assert "smallest to largest" in err
    assert "Fix:" in err


def test_classify_rejects_bad_width(clean_env, capsys):
    assert cli_main(["classify", "wide"]) == 1
    assert "Width must be an integer" in capsys.readouterr().err


def test_usage_and_version(clean_env, capsys):
    assert cli_main([]) == 1
    assert "Usage:" in capsys.readouterr().out
    assert cli_main(["help"]) == 0
    assert "respondkit between" in capsys.readouterr().out
    assert cli_main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("respondkit ")
    assert cli_main(["above"]) == 1
    assert "Usage: respondkit above" in capsys.readouterr().out
    assert cli_main(["nope"]) == 1
    assert "Unknown command: nope" in capsys.readouterr().err
