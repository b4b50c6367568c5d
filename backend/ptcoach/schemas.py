"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List
from datetime import datetime, date
from uuid import UUID


class CamelModel(BaseModel):
    """Base schema exchanged with the mobile client in camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ============== Client Schemas ==============

class ClientBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=1, le=120)
    gender: str
    experience: str  # beginner, intermediate, advanced
    goals: str  # fat_loss, hypertrophy, strength, rehab, sport_specific
    training_frequency: int = Field(..., ge=1, le=7)
    injuries: Optional[str] = None


class ClientCreate(ClientBase):
    pass


class ClientResponse(ClientBase):
    id: UUID
    trainer_id: UUID
    created_at: datetime


# ============== Readiness Schemas ==============

class ReadinessSubmit(CamelModel):
    """Raw wellness report. Ranges and labels are checked by the normalizer."""
    date: date
    sleep_hours: Any
    stress_level: Any
    muscle_soreness: Any
    energy_level: Any

    @field_validator("date", mode="before")
    @classmethod
    def truncate_timestamp(cls, value):
        # The mobile client sends full ISO timestamps
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value


class ReadinessAssessmentResponse(CamelModel):
    id: UUID
    client_id: UUID
    trainer_id: UUID
    date: date
    sleep_hours: float
    stress_level: str
    muscle_soreness: str
    energy_level: str
    score: int
    recommendation: str
    formula_version: str
    created_at: datetime


class TrendPointResponse(CamelModel):
    """One bar of the readiness chart."""
    label: str
    value: int
    color: Optional[str] = None


class ReadinessTrendResponse(CamelModel):
    """Bar chart payload: ordered points plus the axis maximum."""
    data: List[TrendPointResponse]
    max_value: int
