"""Client model: a trainee managed by a trainer."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from ptcoach.database import Base


class Client(Base):
    """Training client profile."""
    
    __tablename__ = "clients"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    trainer_id = Column(Uuid, ForeignKey("trainers.id", ondelete="CASCADE"), nullable=False, index=True)
    
    # Profile
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(50), nullable=False)
    experience = Column(String(50), nullable=False)  # beginner, intermediate, advanced
    goals = Column(String(50), nullable=False)  # fat_loss, hypertrophy, strength, rehab, sport_specific
    training_frequency = Column(Integer, nullable=False)  # days per week
    injuries = Column(Text, nullable=True)
    
    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    
    # Relationships
    trainer = relationship("Trainer", back_populates="clients")
    readiness_assessments = relationship(
        "ReadinessAssessment",
        back_populates="client",
        cascade="all, delete-orphan",
    )
    
    def __repr__(self):
        return f"<Client {self.name}>"
