"""
Tests for the command-line caller.

Runs main() in-process and inspects stdout/stderr.
"""

import json

import pytest

import cli
from config import get_config
from config import loader


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep real config files and FININD_ variables out of the run."""
    monkeypatch.setattr(loader, "CONFIG_PATHS", [tmp_path / "indicators.toml"])
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **kw: False)
    for suffix in loader.ENV_OVERRIDES:
        monkeypatch.delenv(f"{loader.ENV_PREFIX}{suffix}", raising=False)
    get_config.cache_clear()


KDJ_ARGS = [
    "kdj",
    "--highs", "11,12,13,14,15,16",
    "--lows", "10,9,8,7,6,5",
    "--closes", "10.5,11,12,13,14,15",
    "--period", "3",
]


class TestParseNumbers:

    def test_parse(self):
        assert cli.parse_numbers("1, 2.5,3") == [1.0, 2.5, 3.0]

    def test_parse_trailing_comma(self):
        assert cli.parse_numbers("1,2,") == [1.0, 2.0]

    def test_parse_invalid(self):
        with pytest.raises(Exception, match="comma-separated numbers"):
            cli.parse_numbers("1,two")


class TestKdjCommand:

    def test_text_output(self, capsys):
        assert cli.main(KDJ_ARGS) == 0
        out = capsys.readouterr().out
        assert "KDJ(3, exclusive)" in out
        assert "Period 1: K: 66.67, D: 55.56, J: 88.89" in out
        assert "Period 3:" in out

    def test_json_output(self, capsys):
        assert cli.main(["--format", "json"] + KDJ_ARGS) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["indicator"] == "KDJ"
        assert payload["period"] == 3
        assert payload["count"] == 3
        assert payload["values"][0]["k"] == pytest.approx(200 / 3)

    def test_inclusive(self, capsys):
        assert cli.main(KDJ_ARGS + ["--convention", "inclusive"]) == 0
        out = capsys.readouterr().out
        assert "Period 6:" in out

    def test_mismatched_lengths(self, capsys):
        args = ["kdj", "--highs", "1,2", "--lows", "0,1", "--closes", "1", "--period", "1"]
        assert cli.main(args) == 2
        assert "same length" in capsys.readouterr().err

    def test_zero_period(self, capsys):
        assert cli.main(KDJ_ARGS[:-1] + ["0"]) == 2
        assert "period must be a positive integer" in capsys.readouterr().err

    def test_period_from_config(self, tmp_path, capsys):
        (tmp_path / "indicators.toml").write_text("[kdj]\nperiod = 4\n")
        assert cli.main(KDJ_ARGS[:-2]) == 0
        out = capsys.readouterr().out
        assert "KDJ(4, exclusive)" in out
        assert "Period 2:" in out
        assert "Period 3:" not in out


class TestMacdCommand:

    def test_insufficient_data(self, capsys):
        assert cli.main(["macd", "--closes", "1,2,3,4,5"]) == 0
        assert "(insufficient data)" in capsys.readouterr().out

    def test_short_periods(self, capsys):
        args = ["macd", "--closes", "1,2,3,4", "--short", "2", "--long", "3", "--signal", "2"]
        assert cli.main(args) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "MACD(2, 3, 2)"
        assert lines[1] == "MACD: 0.31, Signal: 0.00, Histogram: 0.31"
        assert len(lines) == 3

    def test_json_output(self, capsys):
        closes = ",".join(str(p) for p in range(10, 50))
        assert cli.main(["-f", "json", "macd", "--closes", closes]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["count"] == 15
        assert payload["long_period"] == 26


class TestConfigErrors:

    def test_bad_config_file(self, tmp_path, capsys):
        (tmp_path / "indicators.toml").write_text("[kdj]\nperiod = -1\n")
        assert cli.main(KDJ_ARGS) == 2
        assert "kdj.period" in capsys.readouterr().err


class TestDemo:

    def test_demo(self, capsys):
        assert cli.main(["demo"]) == 0
        out = capsys.readouterr().out
        assert "Period 7:" in out
        assert "Not enough closes" in out
