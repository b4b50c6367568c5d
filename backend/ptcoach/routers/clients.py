"""Clients API router."""

import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from ptcoach.database import get_db
from ptcoach.exceptions import NotFound
from ptcoach.models import Client, Trainer
from ptcoach.routers.auth import get_current_trainer
from ptcoach.schemas import ClientCreate, ClientResponse

router = APIRouter(prefix="/clients", tags=["clients"])
logger = logging.getLogger(__name__)


def get_owned_client(client_id: UUID, db: Session, trainer: Trainer) -> Client:
    client = (
        db.query(Client)
        .filter(Client.id == client_id, Client.trainer_id == trainer.id)
        .first()
    )
    if not client:
        logger.warning("Client not found (client=%s, trainer=%s)", client_id, trainer.id)
        raise NotFound("Client", str(client_id))
    return client


@router.get("/", response_model=List[ClientResponse])
def list_clients(
    db: Session = Depends(get_db),
    trainer: Trainer = Depends(get_current_trainer),
):
    """List the trainer's clients."""
    clients = (
        db.query(Client)
        .filter(Client.trainer_id == trainer.id)
        .order_by(Client.created_at.desc())
        .all()
    )
    return clients


@router.post("/", response_model=ClientResponse, status_code=201)
def create_client(
    client_data: ClientCreate,
    db: Session = Depends(get_db),
    trainer: Trainer = Depends(get_current_trainer),
):
    """Create a new client."""
    client = Client(trainer_id=trainer.id, **client_data.model_dump())
    db.add(client)
    db.commit()
    db.refresh(client)
    logger.info("Client created (client=%s, trainer=%s)", client.id, trainer.id)
    return client


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(
    client_id: UUID,
    db: Session = Depends(get_db),
    trainer: Trainer = Depends(get_current_trainer),
):
    """Get one client."""
    return get_owned_client(client_id, db, trainer)


@router.delete("/{client_id}", status_code=204)
def delete_client(
    client_id: UUID,
    db: Session = Depends(get_db),
    trainer: Trainer = Depends(get_current_trainer),
):
    """Delete a client and all of their readiness assessments."""
    client = get_owned_client(client_id, db, trainer)
    db.delete(client)
    db.commit()
    logger.info("Client deleted (client=%s, trainer=%s)", client_id, trainer.id)
    return Response(status_code=204)
