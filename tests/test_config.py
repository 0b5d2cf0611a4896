"""Tests for configuration adapters."""

from pathlib import Path

import pytest

from se_transport.adapters.config import AppConfig, VehicleProfileLoader
from se_transport.bootstrap import load_vehicle_profile
from se_transport.domain.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "RESROBOT_API_KEY",
        "TRAFIKLAB_RESROBOT_KEY",
        "TRANSPORT_DEFAULT_LOCATION",
        "TRANSPORT_LANGUAGE",
        "TIMEZONE",
        "CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.timezone == "Europe/Stockholm"
    assert config.language == "sv"
    assert config.resrobot_api_key is None
    assert config.default_location is None
    assert config.sl_api_timeout == 10
    assert config.resrobot_api_timeout == 15
    assert config.airports_timeout == 30
    assert config.fuel_price_sek_per_liter == 19.5


def test_config_reads_resrobot_key_from_either_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given only TRAFIKLAB_RESROBOT_KEY, when loading config, then it is used as the key."""
    monkeypatch.setenv("TRAFIKLAB_RESROBOT_KEY", "from-trafiklab")

    assert AppConfig().resrobot_api_key == "from-trafiklab"


def test_config_reads_default_location(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given TRANSPORT_DEFAULT_LOCATION, when loading config, then it becomes the default."""
    monkeypatch.setenv("TRANSPORT_DEFAULT_LOCATION", "Slussen")

    assert AppConfig().default_location == "Slussen"


def test_config_validates_language(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unsupported language, when loading config, then validation fails."""
    monkeypatch.setenv("TRANSPORT_LANGUAGE", "de")

    with pytest.raises(ValueError, match="language must be either"):
        AppConfig()


def test_config_validates_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown timezone, when loading config, then validation fails."""
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus")

    with pytest.raises(ValueError, match="valid IANA timezone"):
        AppConfig()


def test_config_missing_file_raises(tmp_path: Path) -> None:
    """Given a config file path that does not exist, when loading TOML, then it raises."""
    config = AppConfig(config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        config.load_toml_data()


def test_vehicle_profile_defaults_without_config_file() -> None:
    """Given no config file, when loading the vehicle, then the default profile is used."""
    profile = VehicleProfileLoader.load(AppConfig())

    assert profile.name == "VW Tiguan Allspace 2018"
    assert profile.tank_size_liters == 58.0


def test_vehicle_profile_overrides_from_toml(tmp_path: Path) -> None:
    """Given a [vehicle] table, when loading the vehicle, then its fields override defaults."""
    config_path = tmp_path / "transport.toml"
    config_path.write_text(
        '[vehicle]\nname = "Volvo V70"\nfuel_type = "Bensin"\ntank_size_liters = 70\n',
        encoding="utf-8",
    )

    profile = VehicleProfileLoader.load(AppConfig(config_file=str(config_path)))

    assert profile.name == "Volvo V70"
    assert profile.fuel_type == "Bensin"
    assert profile.tank_size_liters == 70.0
    assert profile.long_distance_rate == 7.0


def test_vehicle_profile_rejects_non_numeric_rate(tmp_path: Path) -> None:
    """Given a non-numeric rate, when loading through bootstrap, then ConfigurationError."""
    config_path = tmp_path / "transport.toml"
    config_path.write_text('[vehicle]\nlong_distance_rate = "fast"\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="long_distance_rate"):
        load_vehicle_profile(AppConfig(config_file=str(config_path)))
