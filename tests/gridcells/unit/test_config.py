from __future__ import annotations

from gridcells.config import (
    GridcellsConfig,
    get_config,
    initialize_config,
    load_config,
    resolve_log_level_name,
    use_config,
)


def test_load_config_defaults() -> None:
    cfg = load_config(env={})
    assert cfg == GridcellsConfig(log_level="WARNING", log_format="text", reverse_lookup_tolerance=0.0)


def test_load_config_parses_env() -> None:
    cfg = load_config(
        env={
            "GRIDCELLS_LOG_LEVEL": "debug",
            "GRIDCELLS_LOG_FORMAT": "JSON",
            "GRIDCELLS_REVERSE_LOOKUP_TOLERANCE": "1e-6",
        }
    )
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"
    assert cfg.reverse_lookup_tolerance == 1e-6


def test_load_config_falls_back_on_invalid_values() -> None:
    cfg = load_config(
        env={
            "GRIDCELLS_LOG_FORMAT": "xml",
            "GRIDCELLS_REVERSE_LOOKUP_TOLERANCE": "close-enough",
        }
    )
    assert cfg.log_format == "text"
    assert cfg.reverse_lookup_tolerance == 0.0
    assert load_config(env={"GRIDCELLS_REVERSE_LOOKUP_TOLERANCE": "-1"}).reverse_lookup_tolerance == 0.0
    assert load_config(env={"GRIDCELLS_REVERSE_LOOKUP_TOLERANCE": "nan"}).reverse_lookup_tolerance == 0.0


def test_resolve_log_level_prefers_package_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("GRIDCELLS_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("GRIDCELLS_LOG_LEVEL")
    assert resolve_log_level_name() == "INFO"


def test_initialize_config_reads_current_env(monkeypatch) -> None:
    monkeypatch.setenv("GRIDCELLS_REVERSE_LOOKUP_TOLERANCE", "0.25")
    with use_config(GridcellsConfig()):
        initialize_config()
        assert get_config().reverse_lookup_tolerance == 0.25


def test_use_config_restores_previous() -> None:
    before = get_config()
    override = GridcellsConfig(log_level="DEBUG")
    with use_config(override):
        assert get_config() is override
    assert get_config() is before


def test_blank_values_count_as_unset() -> None:
    cfg = load_config(
        env={
            "GRIDCELLS_LOG_LEVEL": "  ",
            "LOG_LEVEL": "info",
            "GRIDCELLS_LOG_FORMAT": "",
            "GRIDCELLS_REVERSE_LOOKUP_TOLERANCE": " 0.5 ",
        }
    )
    assert cfg == GridcellsConfig(log_level="INFO", log_format="text", reverse_lookup_tolerance=0.5)
