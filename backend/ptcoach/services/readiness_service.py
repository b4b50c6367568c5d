"""Readiness service - scores wellness reports and serves readiness history."""

import logging
from datetime import date, timedelta
from typing import Any, List, Optional, Tuple
from uuid import UUID

from ptcoach.models import ReadinessAssessment
from ptcoach.readiness import (
    DEFAULT_TIERS,
    FORMULA_V1,
    AssessmentRecord,
    DateRange,
    ReadinessTier,
    ScoringFormula,
    TrendSeries,
    assess,
    readiness_trend,
)
from ptcoach.readiness.trends import trailing_range
from ptcoach.services.readiness_store import ReadinessStore

logger = logging.getLogger(__name__)


class ReadinessService:
    """Runs the readiness pipeline against a trainer-scoped store."""

    def __init__(
        self,
        store: ReadinessStore,
        formula: ScoringFormula = FORMULA_V1,
        tiers: Tuple[ReadinessTier, ...] = DEFAULT_TIERS,
        history_days: int = 30,
    ):
        self.store = store
        self.formula = formula
        self.tiers = tiers
        self.history_days = history_days

    def submit(
        self,
        client_id: UUID,
        assessment_date: date,
        sleep_hours: Any,
        stress_level: Any,
        muscle_soreness: Any,
        energy_level: Any,
    ) -> ReadinessAssessment:
        """
        Score a wellness report and persist it as a new assessment.

        Inputs are validated before the store is touched, so an invalid
        report raises InvalidInput without any storage call. A missing client
        raises NotFound; database errors raise StorageFailure.
        """
        trainer_id = self.store.trainer_id
        logger.info(
            "Submitting readiness check (trainer=%s, client=%s, date=%s)",
            trainer_id, client_id, assessment_date,
        )

        result = assess(
            sleep_hours,
            stress_level,
            muscle_soreness,
            energy_level,
            formula=self.formula,
            tiers=self.tiers,
        )

        record = AssessmentRecord(
            client_id=client_id,
            trainer_id=trainer_id,
            date=assessment_date,
            sleep_hours=result.wellness.sleep_hours,
            stress_level=result.wellness.stress,
            muscle_soreness=result.wellness.soreness,
            energy_level=result.wellness.energy,
            score=result.score,
            recommendation=result.recommendation,
            formula_version=result.formula_version,
        )
        assessment_id = self.store.create_assessment(record)

        logger.info(
            "Readiness check submitted (id=%s, client=%s, score=%s, tier=%s)",
            assessment_id, client_id, result.score, result.tier.name,
        )
        return self.store.get_assessment(client_id, assessment_id)

    def history(self, client_id: UUID, days: Optional[int] = None) -> List[ReadinessAssessment]:
        """Assessments from the last ``days`` days, newest first."""
        days = days if days is not None else self.history_days
        since = date.today() - timedelta(days=days)
        assessments = self.store.recent_assessments(client_id, since)
        logger.info("Fetched readiness history (client=%s, count=%d)", client_id, len(assessments))
        return assessments

    def latest(self, client_id: UUID) -> Optional[ReadinessAssessment]:
        """The most recent assessment, or None if the client has none."""
        latest = self.store.latest_assessment(client_id)
        if latest is None:
            logger.info("No readiness scores found (client=%s)", client_id)
        return latest

    def get(self, client_id: UUID, assessment_id: UUID) -> ReadinessAssessment:
        return self.store.get_assessment(client_id, assessment_id)

    def trend(
        self,
        client_id: UUID,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> TrendSeries:
        """
        Chart series for ``client_id`` between ``start`` and ``end``.

        Missing bounds default to the trailing history window ending today
        (or ending at ``end``).
        """
        end = end or date.today()
        if start is None:
            date_range = trailing_range(self.history_days, today=end)
        else:
            date_range = DateRange(start, end)
        return readiness_trend(self.store, client_id, date_range, tiers=self.tiers)
