from pathlib import Path

from src.config import AppConfig, GraphConfig, get_config, reset_config


def test_graph_config_defaults():
    config = GraphConfig()

    assert config.costs_file == "FlightCostsSmall119.csv"
    assert config.delimiter == ","
    assert config.has_header is True
    assert config.costs_path == config.data_dir / config.costs_file


def test_graph_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("FCG_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FCG_GRAPH_COSTS_FILE", "other.csv")
    monkeypatch.setenv("FCG_GRAPH_HAS_HEADER", "false")

    config = GraphConfig()

    assert config.costs_path == Path(tmp_path) / "other.csv"
    assert config.has_header is False


def test_get_config_is_cached_until_reset(monkeypatch):
    reset_config()
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("FCG_LOG_LEVEL", "DEBUG")
    reset_config()
    try:
        assert get_config() is not first
        assert get_config().observability.level == "DEBUG"
    finally:
        monkeypatch.delenv("FCG_LOG_LEVEL")
        reset_config()


def test_app_config_project_root():
    assert (AppConfig().project_root / "src").is_dir()
