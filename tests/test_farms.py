"""
Fleet Configuration Tests.
"""
import json

import pytest
from pydantic import ValidationError

from solar_simulator.core.config import Settings
from solar_simulator.core.exceptions import ConfigurationError
from solar_simulator.main import build_clock
from solar_simulator.modules.farms.fleet import DEFAULT_FARMS, load_farms, parse_farms


class TestFleetLoading:
    """load_farms / parse_farms tests."""

    def test_default_fleet(self):
        farms = load_farms(None)

        assert farms is DEFAULT_FARMS
        assert [f.id for f in farms] == ["provence", "occitanie", "aquitaine"]
        assert farms[0].peak_power_watts == 400.0
        assert farms[0].rated_power_watts == 2_000_000.0

    def test_load_from_file_with_short_keys(self, tmp_path):
        path = tmp_path / "farms.json"
        path.write_text(json.dumps([
            {"id": "bretagne", "name": "Rennes", "panels": 1200, "peakPower": 0.35, "lat": 48.11},
        ]))

        farm, = load_farms(path)

        assert farm.id == "bretagne"
        assert farm.name == "Rennes"
        assert farm.panels == 1200
        assert farm.peak_power_kw == 0.35
        assert farm.latitude == 48.11

    def test_load_from_file_with_field_names(self, tmp_path):
        path = tmp_path / "farms.json"
        path.write_text(json.dumps([
            {"id": "alsace", "name": "Strasbourg", "panels": 800, "peak_power_kw": 0.42, "latitude": 48.57},
        ]))

        farm, = load_farms(str(path))

        assert farm.peak_power_kw == 0.42
        assert farm.latitude == 48.57

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_farms(tmp_path / "missing.json")

        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert "missing.json" in exc_info.value.details["path"]

    @pytest.mark.parametrize("entry", [
        {"id": "x", "name": "X", "panels": 0, "peakPower": 0.4, "lat": 10},
        {"id": "x", "name": "X", "panels": 10, "peakPower": -1, "lat": 10},
        {"id": "x", "name": "X", "panels": 10, "peakPower": 0.4, "lat": 120},
        {"id": "", "name": "X", "panels": 10, "peakPower": 0.4, "lat": 10},
        {"id": "bad id", "name": "X", "panels": 10, "peakPower": 0.4, "lat": 10},
        {"id": "x", "panels": 10, "peakPower": 0.4, "lat": 10},
        {"id": "x", "name": "X", "panels": 10, "peakPower": 0.4, "lat": 10, "extra": True},
    ])
    def test_invalid_entries(self, entry):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_farms(json.dumps([entry]))

        assert exc_info.value.details["validation_errors"]

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError):
            parse_farms("{not json")

    def test_empty_fleet(self):
        with pytest.raises(ConfigurationError):
            parse_farms("[]")

    def test_duplicate_ids(self):
        entry = {"id": "x", "name": "X", "panels": 10, "peakPower": 0.4, "lat": 10}

        with pytest.raises(ConfigurationError) as exc_info:
            parse_farms(json.dumps([entry, entry]))

        assert exc_info.value.details["duplicates"] == ["x"]


class TestSettings:
    """Settings validation tests."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.tick_interval_seconds == 2.0
        assert settings.anomaly_probability == 0.10
        assert settings.system_efficiency == 0.85
        assert settings.metrics_url == "http://localhost:3000/metrics"

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("PORT", "9100")
        monkeypatch.setenv("TICK_INTERVAL_SECONDS", "5")
        monkeypatch.setenv("ENVIRONMENT", "Production")

        settings = Settings(_env_file=None)

        assert settings.port == 9100
        assert settings.tick_interval_seconds == 5.0
        assert settings.environment == "production"

    @pytest.mark.parametrize("overrides", [
        {"tick_interval_seconds": 0},
        {"anomaly_probability": 1.5},
        {"environment": "staging"},
        {"port": 0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_unknown_timezone(self):
        with pytest.raises(ConfigurationError):
            build_clock("Mars/Olympus_Mons")

    def test_timezone_clock_is_aware(self):
        now = build_clock("Europe/Paris")()

        assert now.tzinfo is not None
