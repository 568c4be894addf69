"""Tests for the flight-graph command line."""

import logging

import pytest
from click.testing import CliRunner

from src.cli import main
from src.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep INFO logs out of the captured output and restore the root logger."""
    monkeypatch.setenv("FCG_LOG_LEVEL", "WARNING")
    reset_config()
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    reset_config()


@pytest.fixture
def runner():
    return CliRunner()


def test_csv_command_prints_rendering(runner, tmp_path):
    costs = tmp_path / "costs.csv"
    costs.write_text("o,d,v,c\nA,B,C,5.0\n", encoding="utf-8")

    result = runner.invoke(main, ["csv", str(costs), "--labels"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("3 2\n0: 0->2  5.00  \n1: 1->0  0.00  \n2: \n")
    assert "0\tA" in result.output
    assert "2\tC" in result.output


def test_csv_command_reports_parse_error(runner, tmp_path):
    costs = tmp_path / "costs.csv"
    costs.write_text("o,d,v,c\nA,B,C,nope\n", encoding="utf-8")

    result = runner.invoke(main, ["csv", str(costs)])

    assert result.exit_code == 1
    assert "non-numeric cost" in result.output


def test_csv_command_missing_file(runner, tmp_path):
    result = runner.invoke(main, ["csv", str(tmp_path / "absent.csv")])

    assert result.exit_code == 1
    assert "Failed to read graph data" in result.output


def test_stream_command(runner, tmp_path):
    stream_file = tmp_path / "graph.txt"
    stream_file.write_text("2 1\n1 0 0.5\n", encoding="utf-8")

    result = runner.invoke(main, ["stream", str(stream_file)])

    assert result.exit_code == 0, result.output
    assert result.output == "2 1\n0: \n1: 1->0  0.50  \n"


def test_stream_command_malformed(runner, tmp_path):
    stream_file = tmp_path / "graph.txt"
    stream_file.write_text("2 1\n1 9 0.5\n", encoding="utf-8")

    result = runner.invoke(main, ["stream", str(stream_file)])

    assert result.exit_code == 1
    assert "vertex 9" in result.output


def test_debug_flag(runner, tmp_path, monkeypatch):
    stream_file = tmp_path / "graph.txt"
    stream_file.write_text("0 0\n", encoding="utf-8")
    monkeypatch.setenv("FCG_LOG_LEVEL", "INFO")

    result = runner.invoke(main, ["--debug", "stream", str(stream_file)])

    assert result.exit_code == 0


def test_csv_command_unreadable_row_is_reported(runner, tmp_path):
    costs = tmp_path / "costs.csv"
    costs.write_text("o,d,v,c\n" + "A" * 200_000 + ",B,C,1\n", encoding="utf-8")

    result = runner.invoke(main, ["csv", str(costs)])

    assert result.exit_code == 1
    assert "Failed to read graph data" in result.output
