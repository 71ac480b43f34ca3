"""Tests for the command-line interface and environment settings."""
import json
import runpy
import sys

import pytest

from natprint.cli import main
from natprint.config import DEFAULT_STRATEGY, Settings, load_settings
from natprint.core.errors import InvalidBase
from natprint.core.number_types import INT32, UINT64
from natprint.printers.registry import Strategy


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings({}) == Settings()
        assert Settings().strategy is DEFAULT_STRATEGY
        assert Settings().number_type is INT32

    def test_overrides(self):
        s = load_settings({
            "NATPRINT_BASE": "16",
            "NATPRINT_STRATEGY": "LR",
            "NATPRINT_TYPE": "uint64",
        })
        assert s.base == 16
        assert s.strategy is Strategy.LR
        assert s.number_type is UINT64

    def test_bad_base(self):
        with pytest.raises(ValueError, match="NATPRINT_BASE"):
            load_settings({"NATPRINT_BASE": "ten"})
        with pytest.raises(InvalidBase):
            load_settings({"NATPRINT_BASE": "99"})

    def test_bad_strategy(self):
        with pytest.raises(ValueError, match="NATPRINT_STRATEGY"):
            load_settings({"NATPRINT_STRATEGY": "fast"})


class TestEncodeCommand:
    def test_encode_decimal(self, capsys):
        assert main(["encode", "123", "0", "10000"]) == 0
        assert capsys.readouterr().out == "123 0 10000\n"

    def test_encode_hex(self, capsys):
        assert main(["encode", "--base", "16", "--strategy", "lr2", "255", "0x200"]) == 0
        assert capsys.readouterr().out == "ff 200\n"

    def test_encode_custom_alphabet(self, capsys):
        assert main(["encode", "--base", "2", "--alphabet", "LH", "5"]) == 0
        assert capsys.readouterr().out == "HLH\n"

    def test_encode_type(self, capsys):
        assert main(["encode", "--type", "uint64", str(2**64 - 1)]) == 0
        assert capsys.readouterr().out == "18446744073709551615\n"

    def test_out_of_range(self, capsys):
        assert main(["encode", "--type", "int8", "300"]) == 2
        assert "ERROR" in capsys.readouterr().err

    def test_out_of_range_prints_nothing(self, capsys):
        """A bad value late in the list leaves stdout empty."""
        assert main(["encode", "--type", "int8", "1", "300"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR" in captured.err

    def test_bad_base(self, capsys):
        assert main(["encode", "--base", "40", "1"]) == 2
        assert "Base must be" in capsys.readouterr().err

    def test_bad_max_base(self, capsys):
        assert main(["encode", "--max-base", "50", "1"]) == 2
        assert "ERROR: max_base must be 2-36" in capsys.readouterr().err

    def test_env_base(self, capsys, monkeypatch):
        monkeypatch.setenv("NATPRINT_BASE", "8")
        assert main(["encode", "255"]) == 0
        assert capsys.readouterr().out == "377\n"

    def test_bad_env(self, capsys, monkeypatch):
        monkeypatch.setenv("NATPRINT_STRATEGY", "fast")
        assert main(["encode", "1"]) == 2
        assert "NATPRINT_STRATEGY" in capsys.readouterr().err


class TestCheckCommand:
    def test_check_passes(self, capsys):
        assert main(["check"]) == 0
        out = capsys.readouterr().out
        assert out.count("ok") == 8
        assert "FAILED" not in out

    def test_check_single_type(self, capsys):
        assert main(["check", "--type", "uint8"]) == 0
        assert capsys.readouterr().out.count("uint8") == 4


class TestBenchCommand:
    def test_bench_table(self, capsys):
        assert main(["bench", "--start", "1", "--finish", "200"]) == 0
        out = capsys.readouterr().out
        assert "Running the printers on numbers in [1, 200]" in out
        for strategy in Strategy:
            assert strategy.value in out
        assert "Last converted number: 200" in out

    def test_bench_json(self, capsys):
        assert main(["bench", "--start", "0", "--finish", "9",
                     "--strategy", "modulo", "--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert len(rows) == 1
        assert rows[0]["strategy"] == "modulo"
        assert rows[0]["count"] == 10
        assert rows[0]["last"] == "9"

    def test_start_above_default_range(self, capsys):
        """A start past the default finish still benchmarks a window."""
        assert main(["bench", "--start", "60000000", "--finish", "60000009",
                     "--strategy", "lr", "--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows[0]["count"] == 10
        assert rows[0]["last"] == "60000009"

    def test_empty_range(self, capsys):
        assert main(["bench", "--start", "10", "--finish", "5"]) == 2
        captured = capsys.readouterr()
        assert "ERROR: Empty range [10, 5]" in captured.err
        assert "Traceback" not in captured.err

    def test_range_outside_type(self, capsys):
        assert main(["bench", "--type", "int8", "--start", "0", "--finish", "300"]) == 2
        assert "does not fit int8" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys):
        assert main([]) == 2
        assert "natprint" in capsys.readouterr().out


class TestModuleEntryPoint:
    def test_python_dash_m(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["natprint", "encode", "--base", "16", "255"])
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("natprint.__main__", run_name="__main__")
        assert exc.value.code == 0
        assert capsys.readouterr().out == "ff\n"
