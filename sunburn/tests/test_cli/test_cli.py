"""Tests for CLI commands."""

import json
from pathlib import Path

from sunburn.cli import main


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_profiles(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "none.yaml"), "profiles"])
        assert result == 0
        out = capsys.readouterr().out
        assert "MED    200 J/m^2" in out
        assert "SPF 50+" in out
        assert "Profuse" in out

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        assert "damage_rate_per_minute" in capsys.readouterr().out

    def test_config_set(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main([
            "--config", str(config_path),
            "config", "set", "calculation.max_points=30",
        ])
        assert result == 0
        assert "30" in capsys.readouterr().out

    def test_config_set_bad_key(self, tmp_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "config", "set", "calculation.nope=1",
        ])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    def test_estimate_json(self, tmp_path: Path, open_meteo_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "estimate",
            "--forecast", str(open_meteo_path),
            "--skin-type", "I",
            "--now", "2026-06-15T09:00:00Z",
            "--format", "json",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["burn_time"] is not None
        assert 10 < data["minutes_until_burn"] < 45

    def test_estimate_uses_profile_defaults(
        self, config_yaml_path: Path, open_meteo_path: Path, capsys
    ):
        result = main([
            "--config", str(config_yaml_path),
            "estimate",
            "--forecast", str(open_meteo_path),
            "--now", "2026-06-15T09:00:00Z",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "Skin III | SPF_30" in out

    def test_estimate_missing_file(self, tmp_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "estimate", "--forecast", str(tmp_path / "missing.json"),
        ])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    def test_estimate_insufficient_data(self, tmp_path: Path, capsys):
        path = tmp_path / "short.json"
        path.write_text(json.dumps([{"timestamp": "2026-06-15T09:00:00Z", "uv_index": 5}]))
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "estimate", "--forecast", str(path),
        ])
        assert result == 1
        assert "at least 2" in capsys.readouterr().out

    def test_estimate_bad_timezone(self, tmp_path: Path, open_meteo_path: Path, capsys):
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "estimate", "--forecast", str(open_meteo_path),
            "--timezone", "Nowhere/Special",
        ])
        assert result == 1
        assert "Unknown time zone" in capsys.readouterr().out

    def test_estimate_malformed_yaml_forecast(self, tmp_path: Path, capsys):
        path = tmp_path / "forecast.yaml"
        path.write_text("points: [ {timestamp: 1, uv_index: 2")
        result = main([
            "--config", str(tmp_path / "none.yaml"),
            "estimate", "--forecast", str(path),
        ])
        assert result == 1
        assert "Invalid YAML" in capsys.readouterr().out

    def test_malformed_config_yaml(self, tmp_path: Path, open_meteo_path: Path, capsys):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("dose: [")
        result = main([
            "--config", str(config_path),
            "estimate", "--forecast", str(open_meteo_path),
        ])
        assert result == 1
        assert "Error: invalid config" in capsys.readouterr().out

    def test_config_not_a_mapping(self, tmp_path: Path, capsys):
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- 1\n- 2\n")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 1
        assert "must be a YAML mapping" in capsys.readouterr().out
