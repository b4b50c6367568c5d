"""Authentication service with JWT and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from passlib.context import CryptContext
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from ptcoach.config import get_settings
from ptcoach.models import Trainer


settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# JWT settings
ALGORITHM = "HS256"


class AuthService:
    """Service for trainer authentication operations."""
    
    def __init__(self, db: Session):
        self.db = db
    
    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)
    
    @staticmethod
    def get_password_hash(password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)
    
    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
        )
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)
    
    @staticmethod
    def decode_token(token: str) -> Optional[dict]:
        """Decode and validate a JWT token."""
        try:
            payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
            return payload
        except JWTError:
            return None
    
    def get_trainer_by_email(self, email: str) -> Optional[Trainer]:
        """Get a trainer by email."""
        return self.db.query(Trainer).filter(Trainer.email == email).first()
    
    def get_trainer_by_id(self, trainer_id: UUID) -> Optional[Trainer]:
        """Get a trainer by ID."""
        return self.db.query(Trainer).filter(Trainer.id == trainer_id).first()
    
    def create_trainer(self, email: str, password: str, name: str) -> Trainer:
        """Create a new trainer account."""
        trainer = Trainer(
            email=email,
            name=name,
            hashed_password=self.get_password_hash(password),
        )
        self.db.add(trainer)
        self.db.commit()
        self.db.refresh(trainer)
        return trainer
    
    def authenticate_trainer(self, email: str, password: str) -> Optional[Trainer]:
        """Authenticate a trainer by email and password."""
        trainer = self.get_trainer_by_email(email)
        if not trainer or not trainer.is_active:
            return None
        if not self.verify_password(password, trainer.hashed_password):
            return None
        return trainer
