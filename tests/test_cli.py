"""Tests for the Typer CLI entrypoint."""

from __future__ import annotations

import importlib.util
import json
import logging
import math
import warnings
from pathlib import Path

import pytest

if importlib.util.find_spec("typer") is None or importlib.util.find_spec("rich") is None:
    pytest.skip("CLI dependencies are not installed", allow_module_level=True)

from typer.testing import CliRunner

import classperf.cli as cli

runner = CliRunner()

TABLE = "predictions labels\n0.4 1\n0.1 0\n0.3 1\n0.2 0\n"


@pytest.fixture()
def table(tmp_path: Path) -> Path:
    path = tmp_path / "scores.table"
    path.write_text(TABLE, encoding="utf-8")
    return path


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_roc_curve(table: Path) -> None:
    result = runner.invoke(cli.app, ["roc", str(table)])
    assert result.exit_code == 0
    assert _lines(result.stdout) == [
        "0.500000 1.000000",
        "0.000000 1.000000",
        "0.000000 0.500000",
        "0.000000 0.000000",
    ]


def test_roc_curve_with_header_and_thresholds(table: Path) -> None:
    result = runner.invoke(cli.app, ["roc", str(table), "--print-header", "--print-thresholds"])
    assert result.exit_code == 0
    lines = _lines(result.stdout)
    assert lines[0] == "FPR TPR threshold"
    assert lines[1] == "0.500000 1.000000 0.100000"
    assert len(lines) == 5


def test_precision_recall_curve(table: Path) -> None:
    result = runner.invoke(cli.app, ["precision-recall", str(table), "--print-header"])
    assert result.exit_code == 0
    assert _lines(result.stdout) == [
        "recall precision",
        "1.000000 0.666667",
        "1.000000 1.000000",
        "0.500000 1.000000",
        "0.000000 1.000000",
    ]


def test_precision_recall_normalized(table: Path) -> None:
    result = runner.invoke(cli.app, ["precision-recall", str(table), "--normalize-precision"])
    assert result.exit_code == 0
    assert _lines(result.stdout)[0] == "1.000000 0.333333"


def test_auc_targets(table: Path) -> None:
    roc = runner.invoke(cli.app, ["roc-auc", str(table)])
    assert roc.exit_code == 0
    assert roc.stdout.strip() == "0.5"

    pr = runner.invoke(cli.app, ["precision-recall-auc", str(table)])
    assert pr.exit_code == 0
    assert pr.stdout.strip() == "1.0"


def test_optimal_targets(table: Path) -> None:
    pr = runner.invoke(cli.app, ["optimal-precision-recall", str(table)])
    assert pr.exit_code == 0
    assert pr.stdout.strip() == "1.000000 1.000000 0.200000"

    roc = runner.invoke(cli.app, ["optimal-roc", str(table), "--print-header"])
    assert roc.exit_code == 0
    assert roc.stdout.strip() == "fpr=0.000000 tpr=1.000000 threshold=0.200000"


def test_reads_stdin_when_no_table_given() -> None:
    result = runner.invoke(cli.app, ["roc-auc"], input=TABLE)
    assert result.exit_code == 0
    assert result.stdout.strip() == "0.5"


def test_config_file_supplies_defaults(table: Path, tmp_path: Path) -> None:
    config = tmp_path / "classperf.toml"
    config.write_text("[output]\nprint_header = true\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["--config", str(config), "roc", str(table)])
    assert result.exit_code == 0
    assert _lines(result.stdout)[0] == "FPR TPR"


def test_missing_config_file_fails(table: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["--config", str(tmp_path / "nope.toml"), "roc", str(table)])
    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_invalid_label_fails(tmp_path: Path) -> None:
    path = tmp_path / "bad.table"
    path.write_text("predictions labels\n0.1 2\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["roc", str(path)])
    assert result.exit_code == 1
    assert "invalid label" in result.output


def test_empty_table_fails(tmp_path: Path) -> None:
    path = tmp_path / "empty.table"
    path.write_text("predictions labels\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["roc-auc", str(path)])
    assert result.exit_code == 1
    assert "table is empty" in result.output


def test_missing_table_fails(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["roc", str(tmp_path / "missing.table")])
    assert result.exit_code == 1
    assert "cannot read predictions" in result.output


def test_unknown_target_is_usage_error(table: Path) -> None:
    result = runner.invoke(cli.app, ["f1", str(table)])
    assert result.exit_code != 0


def test_summary_json(table: Path) -> None:
    result = runner.invoke(cli.app, ["summary", str(table), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["roc_auc"] == pytest.approx(0.5)
    assert payload["precision_recall_auc"] == pytest.approx(1.0)
    assert payload["optimal_roc"]["threshold"] == pytest.approx(0.2)


def test_summary_rich(table: Path) -> None:
    result = runner.invoke(cli.app, ["summary", str(table)])
    assert result.exit_code == 0
    assert "Classifier performance" in result.stdout
    assert "Optimal thresholds" in result.stdout


def test_summary_rejects_unknown_format(table: Path) -> None:
    result = runner.invoke(cli.app, ["summary", str(table), "--format", "xml"])
    assert result.exit_code == 1
    assert "unknown format" in result.output


def test_verbose_flag_is_accepted(table: Path) -> None:
    result = runner.invoke(cli.app, ["-vv", "roc-auc", str(table)])
    assert result.exit_code == 0
    assert "0.5" in result.stdout


def test_version_flag() -> None:
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert "classperf" in result.stdout


def test_verbosity_levels() -> None:
    from classperf.cli._app import _verbosity_level

    assert _verbosity_level(0) == logging.WARNING
    assert _verbosity_level(1) == logging.INFO
    assert _verbosity_level(3) == logging.DEBUG


SINGLE_CLASS_TABLE = "predictions labels\n0.1 1\n0.2 1\n0.3 1\n"


def test_undecodable_table_fails_with_error_line(tmp_path: Path) -> None:
    path = tmp_path / "binary.table"
    path.write_bytes(b"predictions labels\n0.1 0\n\xff\xfe 1\n")
    result = runner.invoke(cli.app, ["roc", str(path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Error:" in result.output
    assert "not valid UTF-8" in result.output


def test_undecodable_stdin_fails_with_error_line() -> None:
    result = runner.invoke(cli.app, ["roc-auc"], input=b"predictions labels\n\xff 1\n")
    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output


def test_nan_prediction_reports_line(tmp_path: Path) -> None:
    path = tmp_path / "nan.table"
    path.write_text("predictions labels\n0.1 0\nnan 1\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["roc", str(path)])
    assert result.exit_code == 1
    assert "line 3" in result.output


def test_precision_recall_with_thresholds(table: Path) -> None:
    result = runner.invoke(cli.app, ["precision-recall", str(table), "--print-thresholds"])
    assert result.exit_code == 0
    lines = _lines(result.stdout)
    assert lines[0] == "1.000000 0.666667 0.100000"
    assert lines[-1] == "0.000000 1.000000 0.400000"


def test_config_normalize_precision_reaches_command(table: Path, tmp_path: Path) -> None:
    config = tmp_path / "classperf.toml"
    config.write_text("[curves]\nnormalize_precision = true\n", encoding="utf-8")
    result = runner.invoke(cli.app, ["--config", str(config), "precision-recall", str(table)])
    assert result.exit_code == 0
    assert _lines(result.stdout)[0] == "1.000000 0.333333"


def test_summary_json_single_class_reports_nan(tmp_path: Path) -> None:
    path = tmp_path / "positives.table"
    path.write_text(SINGLE_CLASS_TABLE, encoding="utf-8")
    result = runner.invoke(cli.app, ["summary", str(path), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert math.isnan(payload["roc_auc"])
    assert math.isnan(payload["optimal_roc"]["fpr"])
    assert payload["n_neg"] == 0


def test_summary_rich_single_class_renders_nan(tmp_path: Path) -> None:
    path = tmp_path / "positives.table"
    path.write_text(SINGLE_CLASS_TABLE, encoding="utf-8")
    result = runner.invoke(cli.app, ["summary", str(path)])
    assert result.exit_code == 0
    assert "nan" in result.stdout


def test_degenerate_warning_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    from classperf.cli._app import _configure_logging
    from classperf.curves import roc_curve
    from classperf.sweep import build_sweep

    sweep = build_sweep([0.1, 0.2, 0.3], [1, 1, 1])
    logging.captureWarnings(False)
    _configure_logging(0)
    try:
        with caplog.at_level(logging.WARNING), warnings.catch_warnings():
            warnings.simplefilter("always")
            roc_curve(sweep)
    finally:
        logging.captureWarnings(False)

    records = [r for r in caplog.records if "no negative samples" in r.getMessage()]
    assert len(records) == 1
    assert records[0].name == "py.warnings"
