import argparse
import io
import json
import sys

import pytest

from chromatag import derive_color, hash_token
from chromatag.core.conversions import rgb_to_hex
from chromatag.main import main
from chromatag.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.fixture(autouse=True)
def truecolor_env(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["chromatag", *argv])
    main()


def test_json_output_matches_api(monkeypatch, capsys):
    run_cli(monkeypatch, "-t", "TestString", "-t", "🎨", "--json")
    records = json.loads(capsys.readouterr().out)

    assert [r["text"] for r in records] == ["TestString", "🎨"]
    out = derive_color("TestString")
    assert records[0]["hex"] == f"#{rgb_to_hex(*out.rgb)}"
    assert records[0]["rgb"] == [out.red, out.green, out.blue]
    assert records[0]["prefer_white_text"] is out.prefer_white_text
    assert records[0]["token"] == hash_token("TestString")
    assert records[0]["style"] == "light"


def test_both_styles(monkeypatch, capsys):
    run_cli(monkeypatch, "-t", "ContrastCheck", "-st", "both", "-f", "prettyjson")
    records = json.loads(capsys.readouterr().out)

    assert [r["style"] for r in records] == ["light", "dark"]
    for record in records:
        assert record["contrast_ratio"] >= 4.5
        assert record["text_color"] in ("#FFFFFF", "#000000")


def test_empty_string_is_a_valid_input(monkeypatch, capsys):
    run_cli(monkeypatch, "-t", "", "--json")
    records = json.loads(capsys.readouterr().out)
    assert records[0]["text"] == ""
    assert all(0.0 <= v <= 1.0 for v in records[0]["rgb"])


def test_stdin_lines(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("alpha\nbeta\n"))
    run_cli(monkeypatch, "--stdin", "--json")
    records = json.loads(capsys.readouterr().out)
    assert [r["text"] for r in records] == ["alpha", "beta"]


def test_text_output(monkeypatch, capsys):
    run_cli(monkeypatch, "-t", "TestString", "-all")
    out = capsys.readouterr().out
    assert f"#{rgb_to_hex(*derive_color('TestString').rgb)}" in out
    assert "contrast" in out
    assert "oklch(" in out
    assert hash_token("TestString") in out


def test_missing_input_exits_with_usage_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch)
    assert exc.value.code == 2
    assert "-t/--text" in capsys.readouterr().err


def test_bad_style_is_rejected(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-t", "x", "-st", "sepia")
    assert exc.value.code == 2
    assert "[error]" in capsys.readouterr().err


def test_misplaced_subcommand(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-t", "x", "audit")
    assert exc.value.code == 2
    assert "must be the first argument" in capsys.readouterr().err


def test_audit_passes(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "audit", "-c", "30")
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "light" in out and "dark" in out
    assert "[success]" in out


def test_audit_flags_unreachable_target(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "audit", "-c", "3", "-st", "light", "-T", "21")
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "string0" in err
    assert "review manually" in err


def test_unreachable_target_warns_but_succeeds(monkeypatch, capsys):
    run_cli(monkeypatch, "-t", "x", "-T", "21", "--json")
    captured = capsys.readouterr()
    assert json.loads(captured.out)[0]["contrast_ratio"] < 21
    assert "[warning]" in captured.err


@pytest.mark.parametrize(
    'value, expected',
    [('4.5', 4.5), ('30', 21.0), ('0', 1.0), ('7.0.1', 7.01)],
)
def test_target_handler_clamps(value, expected):
    assert INPUT_HANDLERS["target"](value) == pytest.approx(expected)


def test_target_handler_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["target"]("abc")


def test_text_handler_keeps_input_verbatim():
    assert INPUT_HANDLERS["text"]("  A b\t") == "  A b\t"


@pytest.mark.parametrize('value, expected', [('#ff0080', 'FF0080'), ('abc', 'AABBCC'), ('12', '')])
def test_normalize_hex(value, expected):
    assert normalize_hex(value) == expected
