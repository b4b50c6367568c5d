"""Trainer account model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from ptcoach.database import Base


class Trainer(Base):
    """Personal trainer who owns clients and their assessments."""
    
    __tablename__ = "trainers"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    
    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    is_active = Column(Boolean, default=True)
    
    # Relationships
    clients = relationship("Client", back_populates="trainer", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Trainer {self.email}>"
