# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

import pytest

from xgcdutils import __main__ as cli

concrete = ["--r2", "240", "--r1", "46", "--bound", "1"]
concrete_out = "co2 = -47\nco1 = 120\nr2 = 2\nr1 = 0\n"


def feed_input(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _: next(it))


@pytest.mark.parametrize("sub", ["partial", "reference"])
def test_non_interactive_result(capsys, sub):
    cli.main(["-n", sub] + concrete)
    assert capsys.readouterr().out == concrete_out


def test_non_interactive_word_bits(capsys):
    cli.main(["-n", "partial", "-w", "16"] + concrete)
    assert capsys.readouterr().out == concrete_out


def test_prefixed_literals(capsys):
    cli.main(["-n", "partial", "--r2", "0xf0", "--r1", "0b101110", "--bound", "0o1"])
    assert capsys.readouterr().out == concrete_out


def test_bound_defaults_in_non_interactive(capsys):
    cli.main(["-n", "reference", "--r2", "240", "--r1", "46"])
    assert capsys.readouterr().out == concrete_out


def test_verify_passes(capsys):
    cli.main(["partial"] + concrete)
    cli.main(["verify"] + concrete)
    out = capsys.readouterr().out
    assert "Result verified!" in out
    assert "Goodbye!" in out


def test_verify_fails(mocker, capsys):
    mocker.patch("xgcdutils.partial_extended_gcd", return_value=(0, -1, 240, 46))
    with pytest.raises(SystemExit) as exc:
        cli.main(["-n", "verify"] + concrete)
    assert exc.value.code == 1
    assert "Verification Failed!" in capsys.readouterr().out


def test_missing_argument_non_interactive():
    with pytest.raises(OSError):
        cli.main(["-n", "partial", "--r1", "46"])


def test_missing_subcommand_non_interactive():
    with pytest.raises(OSError):
        cli.main(["-n"])


@pytest.mark.parametrize("args", [["--r2", "46", "--r1", "240"], ["--r2", "240", "--r1", "46", "--bound", "-1"]])
def test_precondition_violation(capsys, args):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-n", "partial"] + args)
    assert exc.value.code == 2
    assert "Invalid input" in capsys.readouterr().err


def test_unparsable_literal():
    with pytest.raises(SystemExit) as exc:
        cli.main(["-n", "partial", "--r2", "twelve", "--r1", "4"])
    assert exc.value.code == 2


def test_interactive(monkeypatch, capsys):
    feed_input(monkeypatch, ["nope", "partial", "240", "not a number", "46", ""])
    cli.main([])
    out = capsys.readouterr().out
    assert "Please select an option from the list." in out
    assert "We could not convert your value to an integer." in out
    assert "co1 = 120\nr2 = 2\nr1 = 0\n" in out


def test_interactive_advanced(monkeypatch, capsys):
    feed_input(monkeypatch, ["", "8", "64"])
    cli.main(["-a", "partial", "--r2", "240", "--r1", "46"])
    out = capsys.readouterr().out
    assert "Default value: 0" in out
    assert "word_bits" in out
    assert "Please select an option from the list." in out
    assert "r2 = 2\nr1 = 0\n" in out


def test_interactive_advanced_choice(monkeypatch, capsys):
    feed_input(monkeypatch, ["1", "32"])
    cli.main(["-a", "verify", "--r2", "240", "--r1", "46"])
    assert "Result verified!" in capsys.readouterr().out


def test_verbose_logs(caplog, capsys):
    caplog.set_level(logging.DEBUG, logger="xgcdutils")
    cli.main(["-n", "-V", "partial"] + concrete)
    assert capsys.readouterr().out == concrete_out
    assert "recombinations" in caplog.text


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert "xgcdutils" in capsys.readouterr().out
