"""SQLAlchemy-backed storage for readiness assessments."""

from contextlib import contextmanager
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ptcoach.exceptions import NotFound, StorageFailure
from ptcoach.models import Client, ReadinessAssessment
from ptcoach.readiness.types import AssessmentRecord, DateRange


class ReadinessStore:
    """
    Storage collaborator for the readiness engine, scoped to one trainer.

    Clients owned by another trainer are reported as not found. Database
    errors are rolled back and re-raised as StorageFailure.
    """
    
    def __init__(self, db: Session, trainer_id: UUID):
        self.db = db
        self.trainer_id = trainer_id
    
    @contextmanager
    def _storage_errors(self, operation: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageFailure(
                f"Readiness storage failed during {operation}",
                operation=operation,
            ) from exc
    
    def _require_client(self, client_id: UUID) -> Client:
        client = (
            self.db.query(Client)
            .filter(Client.id == client_id, Client.trainer_id == self.trainer_id)
            .first()
        )
        if not client:
            raise NotFound("Client", str(client_id))
        return client
    
    def create_assessment(self, record: AssessmentRecord) -> UUID:
        """Persist a scored assessment and return its id."""
        with self._storage_errors("create_assessment"):
            self._require_client(record.client_id)
            assessment = ReadinessAssessment(
                client_id=record.client_id,
                trainer_id=record.trainer_id,
                date=record.date,
                sleep_hours=record.sleep_hours,
                stress_level=record.stress_level.value,
                muscle_soreness=record.muscle_soreness.value,
                energy_level=record.energy_level.value,
                score=record.score,
                recommendation=record.recommendation,
                formula_version=record.formula_version,
            )
            self.db.add(assessment)
            self.db.commit()
            self.db.refresh(assessment)
            return assessment.id
    
    def query_assessments(self, client_id: UUID, date_range: DateRange) -> List[ReadinessAssessment]:
        """Assessments in ``date_range``, oldest first."""
        with self._storage_errors("query_assessments"):
            self._require_client(client_id)
            return (
                self.db.query(ReadinessAssessment)
                .filter(
                    ReadinessAssessment.client_id == client_id,
                    ReadinessAssessment.date >= date_range.start,
                    ReadinessAssessment.date <= date_range.end,
                )
                .order_by(ReadinessAssessment.date.asc(), ReadinessAssessment.created_at.asc())
                .all()
            )
    
    def recent_assessments(self, client_id: UUID, since: date) -> List[ReadinessAssessment]:
        """Assessments dated ``since`` or later, newest first."""
        with self._storage_errors("recent_assessments"):
            self._require_client(client_id)
            return (
                self.db.query(ReadinessAssessment)
                .filter(
                    ReadinessAssessment.client_id == client_id,
                    ReadinessAssessment.date >= since,
                )
                .order_by(ReadinessAssessment.date.desc(), ReadinessAssessment.created_at.desc())
                .all()
            )
    
    def latest_assessment(self, client_id: UUID) -> Optional[ReadinessAssessment]:
        """Most recent assessment for the client, if any."""
        with self._storage_errors("latest_assessment"):
            self._require_client(client_id)
            return (
                self.db.query(ReadinessAssessment)
                .filter(ReadinessAssessment.client_id == client_id)
                .order_by(ReadinessAssessment.date.desc(), ReadinessAssessment.created_at.desc())
                .first()
            )
    
    def get_assessment(self, client_id: UUID, assessment_id: UUID) -> ReadinessAssessment:
        """Look up one assessment of the client."""
        with self._storage_errors("get_assessment"):
            self._require_client(client_id)
            assessment = (
                self.db.query(ReadinessAssessment)
                .filter(
                    ReadinessAssessment.id == assessment_id,
                    ReadinessAssessment.client_id == client_id,
                )
                .first()
            )
            if not assessment:
                raise NotFound("Readiness assessment", str(assessment_id))
            return assessment
