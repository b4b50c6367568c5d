"""Readiness assessment model: a scored daily wellness report."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship

from ptcoach.database import Base


class ReadinessAssessment(Base):
    """Daily readiness check for a client. Rows are never updated."""
    
    __tablename__ = "readiness_assessments"
    __table_args__ = (
        Index("ix_readiness_assessments_client_date", "client_id", "date"),
    )
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id = Column(Uuid, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    trainer_id = Column(Uuid, ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    
    # Wellness inputs
    sleep_hours = Column(Numeric(3, 1), nullable=False)  # 0.0-24.0
    stress_level = Column(String(20), nullable=False)  # low, medium, high
    muscle_soreness = Column(String(20), nullable=False)  # none, mild, moderate, severe
    energy_level = Column(String(20), nullable=False)  # low, medium, high
    
    # Derived from the inputs by the scoring formula
    score = Column(Integer, nullable=False)  # 0-100
    recommendation = Column(Text, nullable=False)
    formula_version = Column(String(20), nullable=False)
    
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    
    # Relationships
    client = relationship("Client", back_populates="readiness_assessments")
    
    def __repr__(self):
        return f"<ReadinessAssessment {self.date} - Score:{self.score}>"
