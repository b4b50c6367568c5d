"""Trainer authentication router."""

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from uuid import UUID

from ptcoach.database import get_db
from ptcoach.exceptions import AuthenticationError, ConflictError
from ptcoach.models import Trainer
from ptcoach.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


# ============== Schemas ==============

class TrainerRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    trainer_id: UUID
    name: str


class TrainerMeResponse(BaseModel):
    id: UUID
    email: str
    name: str


# ============== Dependencies ==============

def get_current_trainer(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Trainer:
    """Resolve the trainer from the bearer token."""
    if not token:
        raise AuthenticationError()
    
    auth_service = AuthService(db)
    payload = auth_service.decode_token(token)
    if not payload or not payload.get("sub"):
        raise AuthenticationError("Invalid or expired token")
    
    try:
        trainer_id = UUID(payload["sub"])
    except ValueError:
        raise AuthenticationError("Invalid or expired token") from None
    
    trainer = auth_service.get_trainer_by_id(trainer_id)
    if not trainer or not trainer.is_active:
        raise AuthenticationError("Invalid or expired token")
    return trainer


# ============== Auth Endpoints ==============

@router.post("/register", response_model=TokenResponse, status_code=201)
def register(
    trainer_data: TrainerRegister,
    db: Session = Depends(get_db),
):
    """Register a new trainer."""
    auth_service = AuthService(db)
    
    if auth_service.get_trainer_by_email(trainer_data.email):
        raise ConflictError("Email already registered")
    
    trainer = auth_service.create_trainer(
        email=trainer_data.email,
        password=trainer_data.password,
        name=trainer_data.name,
    )
    access_token = auth_service.create_access_token(data={"sub": str(trainer.id)})
    
    return TokenResponse(
        access_token=access_token,
        trainer_id=trainer.id,
        name=trainer.name,
    )


@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Login with email and password."""
    auth_service = AuthService(db)
    
    trainer = auth_service.authenticate_trainer(form_data.username, form_data.password)
    if not trainer:
        raise AuthenticationError("Incorrect email or password")
    
    access_token = auth_service.create_access_token(data={"sub": str(trainer.id)})
    
    return TokenResponse(
        access_token=access_token,
        trainer_id=trainer.id,
        name=trainer.name,
    )


@router.get("/me", response_model=TrainerMeResponse)
def get_me(
    current_trainer: Trainer = Depends(get_current_trainer),
):
    """Get current authenticated trainer info."""
    return TrainerMeResponse(
        id=current_trainer.id,
        email=current_trainer.email,
        name=current_trainer.name,
    )
