#!/usr/bin/env python3
"""
Audit stored readiness assessments against the scoring formula.

Re-derives score and recommendation from each row's wellness inputs using the
formula version recorded on the row, and reports rows that do not reproduce.
Nothing is modified; exits with status 1 when mismatches are found.

Run with: python scripts/check_readiness_consistency.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy.orm import Session

from ptcoach.database import SessionLocal
from ptcoach.exceptions import InvalidInput
from ptcoach.models import ReadinessAssessment
from ptcoach.readiness import get_formula, is_consistent


def find_inconsistent(db: Session, batch_size: int = 500) -> list:
    """Return ``(assessment, reason)`` pairs for rows that do not reproduce."""
    problems = []
    query = db.query(ReadinessAssessment).order_by(ReadinessAssessment.created_at)
    for assessment in query.yield_per(batch_size):
        try:
            formula = get_formula(assessment.formula_version)
        except ValueError as e:
            problems.append((assessment, str(e)))
            continue
        try:
            consistent = is_consistent(assessment, formula=formula)
        except InvalidInput as e:
            problems.append((assessment, str(e)))
            continue
        if not consistent:
            problems.append((assessment, "score/recommendation mismatch"))
    return problems


def main() -> int:
    db = SessionLocal()
    try:
        total = db.query(ReadinessAssessment).count()
        print(f"Checking {total} readiness assessments")
        problems = find_inconsistent(db)
        for assessment, reason in problems:
            print(
                f"  {assessment.id} client={assessment.client_id} date={assessment.date} "
                f"score={assessment.score}: {reason}"
            )
        print(f"Done: {len(problems)} inconsistent of {total}")
        return 1 if problems else 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
