"""Tests for the import-metrics command-line entry point."""

import sys
import os

from sqlalchemy import func, select
from sqlalchemy.orm import Session

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from import_metrics import main
from models import ReportingDashboard
from conftest import SAMPLE_ROWS, write_workbook


def count_rows(engine):
    with Session(engine) as session:
        return session.scalar(select(func.count()).select_from(ReportingDashboard))


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage: import-metrics <excel_file_path>" in capsys.readouterr().out


def test_usage_with_extra_arguments(capsys):
    assert main(["a.xlsx", "b.xlsx"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_successful_import(monkeypatch, engine, db_url, metrics_workbook):
    monkeypatch.setenv("DATABASE_URL", db_url)
    assert main([metrics_workbook]) == 0
    assert count_rows(engine) == 3


def test_missing_file_exits_nonzero(monkeypatch, capsys, engine, db_url, tmp_path):
    monkeypatch.setenv("DATABASE_URL", db_url)
    assert main([str(tmp_path / "missing.xlsx")]) == 1
    err = capsys.readouterr().err
    assert "Database import failed" in err
    assert "File not found" in err


def test_write_failure_exits_nonzero(monkeypatch, capsys, engine, db_url, tmp_path):
    monkeypatch.setenv("DATABASE_URL", db_url)
    rows = [SAMPLE_ROWS[0], SAMPLE_ROWS[1][:1] + (None,) + SAMPLE_ROWS[1][2:]]
    path = write_workbook(tmp_path / "bad_order.xlsx", rows)

    assert main([path]) == 1
    assert "Database import failed" in capsys.readouterr().err
    assert count_rows(engine) == 0


def test_connection_failure_exits_nonzero(monkeypatch, capsys, tmp_path, metrics_workbook):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'no_such_dir' / 'x.db'}")
    assert main([metrics_workbook]) == 1
    assert "Database import failed" in capsys.readouterr().err


def test_invalid_settings_exit_nonzero(monkeypatch, capsys, metrics_workbook):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_PORT", "abc")
    assert main([metrics_workbook]) == 1
    err = capsys.readouterr().err
    assert "Database import failed" in err
    assert "Invalid database settings" in err
