"""Endereco API routes — CRUD; deletes clear the endereco from its owner first."""

from fastapi import APIRouter, Depends, status

from app.interfaces.deps import get_cliente_repository, get_endereco_repository
from app.domain.models.endereco import Endereco
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.domain.schemas.endereco import EnderecoCreate, EnderecoRead, EnderecoUpdate
from app.application.services.entity_service import create_entity, get_entity, list_entities, update_entity
from app.application.services.ownership_service import delete_endereco

router = APIRouter(prefix="/endereco", tags=["Endereco"])


@router.get("", response_model=list[EnderecoRead])
def list_enderecos(repo: BaseRepository[Endereco] = Depends(get_endereco_repository)):
    return list_entities(repo)


@router.get("/{endereco_id}", response_model=EnderecoRead)
def get_endereco(endereco_id: int, repo: BaseRepository[Endereco] = Depends(get_endereco_repository)):
    return get_entity(repo, endereco_id, "Endereço")


@router.post("", response_model=EnderecoRead, status_code=status.HTTP_201_CREATED)
def create(body: EnderecoCreate, repo: BaseRepository[Endereco] = Depends(get_endereco_repository)):
    return create_entity(repo, Endereco(**body.model_dump()))


@router.put("/{endereco_id}", status_code=status.HTTP_204_NO_CONTENT)
def update(
    endereco_id: int,
    body: EnderecoUpdate,
    repo: BaseRepository[Endereco] = Depends(get_endereco_repository),
):
    update_entity(repo, endereco_id, body, "Endereço")


@router.delete("/{endereco_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    endereco_id: int,
    repo: BaseRepository[Endereco] = Depends(get_endereco_repository),
    clientes: ClienteRepository = Depends(get_cliente_repository),
):
    delete_endereco(repo, clientes, endereco_id)
