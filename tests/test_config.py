from decimal import Decimal

import pytest

from bsx_core.settings import EngineSettings
from bsx_utils.logging_setup import resolve_level
from config.loader import DEFAULT_CONFIG, load_config, rules_path


def test_repo_config_matches_defaults():
    cfg = load_config()
    assert cfg["logging"]["level"] == "INFO"
    assert EngineSettings.from_config(cfg) == EngineSettings()


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")


def test_engine_overrides(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text(
        '[engine]\ndialect = "generic"\naggressive_min_amount = 5\nunknown_key = 1\n',
        encoding="utf-8",
    )
    settings = EngineSettings.from_config(load_config(p))
    assert settings.dialect == "generic"
    assert settings.aggressive_min_amount == Decimal("5")
    assert settings.min_line_length == 8


def test_empty_config():
    assert EngineSettings.from_config({}) == EngineSettings()
    assert EngineSettings.from_config(None) == EngineSettings()
    assert DEFAULT_CONFIG.name == "config.toml"


def test_malformed_tables(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('engine = "fast"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
    p.write_text("[engine\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_rules_path_relative_to_config(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('[categorizer]\nrules = "my_rules.yaml"\n', encoding="utf-8")
    assert rules_path(load_config(p)) == tmp_path / "my_rules.yaml"
    assert rules_path(load_config()) is None
    assert rules_path({}) is None


def test_log_level_flags():
    assert resolve_level("info") == "INFO"
    assert resolve_level("chatty") == "INFO"
    assert resolve_level(None) == "INFO"
    assert resolve_level("ERROR", quiet=True) == "WARNING"
    assert resolve_level("ERROR", quiet=True, verbose=True) == "DEBUG"


def test_engine_values_coerced(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text(
        '[engine]\nmin_line_length = "8"\nfingerprint_prefix = "25"\naggressive_min_amount = "2.50"\n',
        encoding="utf-8",
    )
    settings = EngineSettings.from_config(load_config(p))
    assert settings.min_line_length == 8
    assert settings.fingerprint_prefix == 25
    assert settings.aggressive_min_amount == Decimal("2.50")


def test_engine_value_not_a_number():
    with pytest.raises(ValueError):
        EngineSettings.from_config({"engine": {"min_line_length": "eight"}})
