"""Tests for scripts/check_readiness_consistency.py."""

import importlib.util
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from ptcoach.models import ReadinessAssessment
from ptcoach.readiness import assess, is_consistent

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_readiness_consistency.py"


@pytest.fixture(scope="module")
def audit():
    spec = importlib.util.spec_from_file_location("check_readiness_consistency", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def add_row(db, client, score, recommendation, formula_version="v1"):
    row = ReadinessAssessment(
        client_id=client.id,
        trainer_id=client.trainer_id,
        date=date(2026, 10, 1),
        sleep_hours=Decimal("6.5"),
        stress_level="medium",
        muscle_soreness="mild",
        energy_level="high",
        score=score,
        recommendation=recommendation,
        formula_version=formula_version,
    )
    db.add(row)
    db.commit()
    return row


class TestIsConsistent:
    def test_reproducible_row(self, db, client_row):
        expected = assess(Decimal("6.5"), "medium", "mild", "high")
        row = add_row(db, client_row, expected.score, expected.recommendation)
        assert is_consistent(row)

    def test_tampered_score(self, db, client_row):
        row = add_row(db, client_row, 99, "Proceed as planned")
        assert not is_consistent(row)


class TestFindInconsistent:
    def test_reports_only_bad_rows(self, audit, db, client_row):
        expected = assess(Decimal("6.5"), "medium", "mild", "high")
        add_row(db, client_row, expected.score, expected.recommendation)
        tampered = add_row(db, client_row, expected.score, "Rest day recommended")
        unknown = add_row(db, client_row, expected.score, expected.recommendation, formula_version="v9")

        problems = audit.find_inconsistent(db)
        assert [(row.id, reason) for row, reason in problems] == [
            (tampered.id, "score/recommendation mismatch"),
            (unknown.id, "Unknown readiness formula version: 'v9'"),
        ]

    def test_clean_database(self, audit, db, client_row):
        assert audit.find_inconsistent(db) == []

    def test_reports_unscorable_rows_and_keeps_going(self, audit, db, client_row):
        expected = assess(Decimal("6.5"), "medium", "mild", "high")
        corrupt = add_row(db, client_row, expected.score, expected.recommendation)
        corrupt.stress_level = "extreme"
        db.commit()
        tampered = add_row(db, client_row, expected.score, "Rest day recommended")

        problems = audit.find_inconsistent(db)
        assert [(row.id, reason) for row, reason in problems] == [
            (corrupt.id, "unknown category: stressLevel"),
            (tampered.id, "score/recommendation mismatch"),
        ]

    def test_main_exit_status(self, audit, db, client_row, session_factory, monkeypatch):
        corrupt = add_row(db, client_row, 50, "Light workout or rest day")
        corrupt.sleep_hours = Decimal("30.0")
        db.commit()
        monkeypatch.setattr(audit, "SessionLocal", session_factory)
        assert audit.main() == 1
