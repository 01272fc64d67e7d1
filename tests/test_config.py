"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from ubbl.config import (
    DEFAULT_REPORT_VALIDITY_DAYS,
    DEFAULT_SEVERITY_WEIGHTS,
    MAX_REPORT_VALIDITY_DAYS,
    configure_logging,
    load_config,
    report_validity_days,
    severity_weights,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "UBBL_ENV",
        "UBBL_LOG_LEVEL",
        "UBBL_CHECK_DB",
        "UBBL_WEIGHT_CRITICAL",
        "UBBL_REPORT_VALIDITY_DAYS",
    ):
        monkeypatch.delenv(key, raising=False)


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config["UBBL_ENV"] == "development"
        assert config["UBBL_CHECK_DB"] == ":memory:"
        assert config["UBBL_WEIGHT_CRITICAL"] == "15"

    def test_profile(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UBBL_ENV", "production")
        config = load_config(tmp_path)
        assert config["UBBL_LOG_LEVEL"] == "WARNING"
        assert config["UBBL_CHECK_DB"] == "ubbl_checks.db"

    def test_config_json_overrides_profile(self, tmp_path: Path) -> None:
        (tmp_path / ".ubbl").mkdir()
        (tmp_path / ".ubbl" / "config.json").write_text(
            json.dumps({"UBBL_LOG_LEVEL": "ERROR", "UBBL_WEIGHT_MAJOR": 10}), encoding="utf-8"
        )
        config = load_config(tmp_path)
        assert config["UBBL_LOG_LEVEL"] == "ERROR"
        assert config["UBBL_WEIGHT_MAJOR"] == "10"

    def test_env_file_overrides_config_json(self, tmp_path: Path) -> None:
        (tmp_path / ".ubbl").mkdir()
        (tmp_path / ".ubbl" / "config.json").write_text('{"UBBL_LOG_LEVEL": "ERROR"}', encoding="utf-8")
        (tmp_path / ".env").write_text("# comment\nUBBL_LOG_LEVEL = INFO\n\n", encoding="utf-8")
        assert load_config(tmp_path)["UBBL_LOG_LEVEL"] == "INFO"

    def test_environment_overrides_all(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("UBBL_CHECK_DB=from-env-file.db\n", encoding="utf-8")
        monkeypatch.setenv("UBBL_CHECK_DB", "from-environ.db")
        assert load_config(tmp_path)["UBBL_CHECK_DB"] == "from-environ.db"

    def test_malformed_config_json_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".ubbl").mkdir()
        (tmp_path / ".ubbl" / "config.json").write_text("{not json", encoding="utf-8")
        assert load_config(tmp_path)["UBBL_ENV"] == "development"


class TestHelpers:
    def test_severity_weights_default(self) -> None:
        assert severity_weights({}) == DEFAULT_SEVERITY_WEIGHTS

    def test_severity_weights_override(self) -> None:
        weights = severity_weights({"UBBL_WEIGHT_CRITICAL": "20"})
        assert weights["critical"] == 20.0
        assert weights["major"] == DEFAULT_SEVERITY_WEIGHTS["major"]

    def test_severity_weights_non_numeric_ignored(self) -> None:
        weights = severity_weights({"UBBL_WEIGHT_MINOR": "lots"})
        assert weights["minor"] == DEFAULT_SEVERITY_WEIGHTS["minor"]

    def test_report_validity_days(self) -> None:
        assert report_validity_days({"UBBL_REPORT_VALIDITY_DAYS": "30"}) == 30
        assert report_validity_days({}) == DEFAULT_REPORT_VALIDITY_DAYS
        assert report_validity_days({"UBBL_REPORT_VALIDITY_DAYS": "soon"}) == DEFAULT_REPORT_VALIDITY_DAYS

    def test_report_validity_days_clamped(self) -> None:
        huge = {"UBBL_REPORT_VALIDITY_DAYS": "99999999999"}
        assert report_validity_days(huge) == MAX_REPORT_VALIDITY_DAYS
        assert report_validity_days({"UBBL_REPORT_VALIDITY_DAYS": "-5"}) == 0

    def test_configure_logging(self) -> None:
        configure_logging({"UBBL_LOG_LEVEL": "ERROR"})
        assert logging.getLogger("ubbl").level == logging.ERROR
        configure_logging({"UBBL_LOG_LEVEL": "not-a-level"})
        assert logging.getLogger("ubbl").level == logging.INFO
        logging.getLogger("ubbl").setLevel(logging.NOTSET)
