"""Readiness assessments API router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from uuid import UUID

from ptcoach.config import get_settings
from ptcoach.database import get_db
from ptcoach.models import Trainer
from ptcoach.readiness import get_formula
from ptcoach.routers.auth import get_current_trainer
from ptcoach.schemas import (
    ReadinessSubmit,
    ReadinessAssessmentResponse,
    ReadinessTrendResponse,
    TrendPointResponse,
)
from ptcoach.services.readiness_service import ReadinessService
from ptcoach.services.readiness_store import ReadinessStore

router = APIRouter(prefix="/clients/{client_id}/readiness", tags=["readiness"])


def get_readiness_service(
    db: Session = Depends(get_db),
    trainer: Trainer = Depends(get_current_trainer),
) -> ReadinessService:
    """Readiness service scoped to the authenticated trainer."""
    settings = get_settings()
    return ReadinessService(
        ReadinessStore(db, trainer.id),
        formula=get_formula(settings.readiness_formula_version),
        history_days=settings.readiness_history_days,
    )


@router.post("", response_model=ReadinessAssessmentResponse, status_code=201)
def submit_readiness(
    client_id: UUID,
    payload: ReadinessSubmit,
    service: ReadinessService = Depends(get_readiness_service),
):
    """Score a daily wellness report and store it."""
    return service.submit(
        client_id,
        payload.date,
        payload.sleep_hours,
        payload.stress_level,
        payload.muscle_soreness,
        payload.energy_level,
    )


@router.get("", response_model=List[ReadinessAssessmentResponse])
def list_readiness(
    client_id: UUID,
    days: Optional[int] = Query(None, ge=1, le=365),
    service: ReadinessService = Depends(get_readiness_service),
):
    """Readiness history, newest first (last 30 days by default)."""
    return service.history(client_id, days)


@router.get("/latest", response_model=Optional[ReadinessAssessmentResponse])
def get_latest_readiness(
    client_id: UUID,
    service: ReadinessService = Depends(get_readiness_service),
):
    """Most recent readiness assessment, or null."""
    return service.latest(client_id)


@router.get("/trend", response_model=ReadinessTrendResponse)
def get_readiness_trend(
    client_id: UUID,
    start: Optional[date] = None,
    end: Optional[date] = None,
    service: ReadinessService = Depends(get_readiness_service),
):
    """Readiness scores as bar chart data, oldest first."""
    series = service.trend(client_id, start, end)
    return ReadinessTrendResponse(
        data=[
            TrendPointResponse(label=point.label, value=point.value, color=point.color)
            for point in series
        ],
        max_value=series.max_value,
    )


@router.get("/{assessment_id}", response_model=ReadinessAssessmentResponse)
def get_readiness(
    client_id: UUID,
    assessment_id: UUID,
    service: ReadinessService = Depends(get_readiness_service),
):
    """Get one readiness assessment."""
    return service.get(client_id, assessment_id)
