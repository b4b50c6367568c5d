"""Database models package."""

from ptcoach.models.trainer import Trainer
from ptcoach.models.client import Client
from ptcoach.models.readiness_assessment import ReadinessAssessment

__all__ = [
    "Trainer",
    "Client",
    "ReadinessAssessment",
]
