"""Telefone API routes — CRUD; deletes detach the telefone from its owner first."""

from fastapi import APIRouter, Depends, status

from app.interfaces.deps import get_cliente_repository, get_telefone_repository
from app.domain.models.telefone import Telefone
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.domain.schemas.telefone import TelefoneCreate, TelefoneRead, TelefoneUpdate
from app.application.services.entity_service import create_entity, get_entity, list_entities, update_entity
from app.application.services.ownership_service import delete_telefone

router = APIRouter(prefix="/telefone", tags=["Telefone"])


@router.get("", response_model=list[TelefoneRead])
def list_telefones(repo: BaseRepository[Telefone] = Depends(get_telefone_repository)):
    return list_entities(repo)


@router.get("/{telefone_id}", response_model=TelefoneRead)
def get_telefone(telefone_id: int, repo: BaseRepository[Telefone] = Depends(get_telefone_repository)):
    return get_entity(repo, telefone_id, "Telefone")


@router.post("", response_model=TelefoneRead, status_code=status.HTTP_201_CREATED)
def create(body: TelefoneCreate, repo: BaseRepository[Telefone] = Depends(get_telefone_repository)):
    return create_entity(repo, Telefone(**body.model_dump()))


@router.put("/{telefone_id}", status_code=status.HTTP_204_NO_CONTENT)
def update(
    telefone_id: int,
    body: TelefoneUpdate,
    repo: BaseRepository[Telefone] = Depends(get_telefone_repository),
):
    update_entity(repo, telefone_id, body, "Telefone")


@router.delete("/{telefone_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    telefone_id: int,
    repo: BaseRepository[Telefone] = Depends(get_telefone_repository),
    clientes: ClienteRepository = Depends(get_cliente_repository),
):
    delete_telefone(repo, clientes, telefone_id)
