"""Tests for linguist.config loading and overrides."""

import configparser

import pytest

from linguist import config as config_module
from linguist.config import (
    LinguistConfig,
    _load_from_ini,
    get_config_status,
    load_config,
    print_config_summary,
)
from linguist.distortion import min_proficiency_threshold, proficiency_penalty


@pytest.mark.unit
def test_defaults():
    cfg = LinguistConfig()
    assert cfg.distortion.min_proficiency == 70
    assert cfg.distortion.proficiency_penalty == 10
    assert cfg.distortion.penalty_direction == "add"
    assert cfg.distortion.clamp_skill is True
    assert cfg.languages.default_language == "english"
    assert cfg.logging.format == "simple"


@pytest.mark.unit
def test_distortion_env_overrides(monkeypatch):
    monkeypatch.setenv("LINGUIST_MIN_PROFICIENCY", "60")
    monkeypatch.setenv("LINGUIST_PROFICIENCY_PENALTY", "15")
    monkeypatch.setenv("LINGUIST_PENALTY_DIRECTION", "Subtract")
    monkeypatch.setenv("LINGUIST_CLAMP_SKILL", "false")

    cfg = load_config()

    assert cfg.distortion.min_proficiency == 60
    assert cfg.distortion.proficiency_penalty == 15
    assert cfg.distortion.penalty_direction == "subtract"
    assert cfg.distortion.clamp_skill is False


@pytest.mark.unit
def test_invalid_direction_env_is_ignored(monkeypatch):
    monkeypatch.setenv("LINGUIST_PENALTY_DIRECTION", "sideways")
    assert load_config().distortion.penalty_direction == "add"


@pytest.mark.unit
def test_language_and_logging_env_overrides(monkeypatch):
    monkeypatch.setenv("LINGUIST_DEFAULT_LANGUAGE", "romanian")
    monkeypatch.setenv("LINGUIST_ROSTER_PATH", "/tmp/roster.yaml")
    monkeypatch.setenv("LINGUIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINGUIST_LOG_FORMAT", "json")

    cfg = load_config()

    assert cfg.languages.default_language == "romanian"
    assert str(cfg.languages.absolute_roster_path) == "/tmp/roster.yaml"
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.format == "json"


@pytest.mark.unit
def test_ini_overrides():
    """Settings should load from the INI sections."""
    parser = configparser.ConfigParser()
    parser.read_dict(
        {
            "distortion": {
                "min_proficiency": "65",
                "proficiency_penalty": "5",
                "penalty_direction": "subtract",
                "clamp_skill": "no",
            },
            "languages": {"default_language": "greek", "roster_path": "rosters/party.yaml"},
            "logging": {"level": "info", "format": "detailed"},
        }
    )

    cfg = LinguistConfig()
    _load_from_ini(parser, cfg)

    assert cfg.distortion.min_proficiency == 65
    assert cfg.distortion.proficiency_penalty == 5
    assert cfg.distortion.penalty_direction == "subtract"
    assert cfg.distortion.clamp_skill is False
    assert cfg.languages.default_language == "greek"
    assert cfg.languages.absolute_roster_path == (
        config_module.PROJECT_ROOT / "rosters" / "party.yaml"
    )
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == "detailed"


@pytest.mark.unit
def test_ini_ignores_unknown_choices():
    parser = configparser.ConfigParser()
    parser.read_dict(
        {"distortion": {"penalty_direction": "divide"}, "logging": {"format": "xml"}}
    )

    cfg = LinguistConfig()
    _load_from_ini(parser, cfg)

    assert cfg.distortion.penalty_direction == "add"
    assert cfg.logging.format == "simple"


@pytest.fixture
def restore_config(monkeypatch):
    """Yield monkeypatch; undo env changes and reload before the next test."""
    yield monkeypatch
    monkeypatch.undo()
    config_module.reload_config()


@pytest.mark.unit
def test_reload_config_rebuilds_default_pipeline(restore_config):
    assert min_proficiency_threshold() == 70

    restore_config.setenv("LINGUIST_MIN_PROFICIENCY", "55")
    restore_config.setenv("LINGUIST_PROFICIENCY_PENALTY", "20")
    config_module.reload_config()

    assert min_proficiency_threshold() == 55
    assert proficiency_penalty() == 20


@pytest.mark.unit
def test_config_status_keys():
    status = get_config_status()
    assert status["min_proficiency"] == config_module.config.distortion.min_proficiency
    assert "config_file_path" in status
    assert "penalty_direction" in status


@pytest.mark.unit
def test_print_config_summary(capsys):
    print_config_summary()
    out = capsys.readouterr().out
    assert "LINGUIST CONFIGURATION" in out
    assert "Min proficiency" in out
