"""Documento API routes — CRUD; deletes detach the documento from its owner first."""

from fastapi import APIRouter, Depends, status

from app.interfaces.deps import get_cliente_repository, get_documento_repository
from app.domain.models.documento import Documento
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.domain.schemas.documento import DocumentoCreate, DocumentoRead, DocumentoUpdate
from app.application.services.entity_service import create_entity, get_entity, list_entities, update_entity
from app.application.services.ownership_service import delete_documento

router = APIRouter(prefix="/documento", tags=["Documento"])


@router.get("", response_model=list[DocumentoRead])
def list_documentos(repo: BaseRepository[Documento] = Depends(get_documento_repository)):
    return list_entities(repo)


@router.get("/{documento_id}", response_model=DocumentoRead)
def get_documento(documento_id: int, repo: BaseRepository[Documento] = Depends(get_documento_repository)):
    return get_entity(repo, documento_id, "Documento")


@router.post("", response_model=DocumentoRead, status_code=status.HTTP_201_CREATED)
def create(body: DocumentoCreate, repo: BaseRepository[Documento] = Depends(get_documento_repository)):
    """Create a documento not attached to any cliente."""
    return create_entity(repo, Documento(**body.model_dump()))


@router.put("/{documento_id}", status_code=status.HTTP_204_NO_CONTENT)
def update(
    documento_id: int,
    body: DocumentoUpdate,
    repo: BaseRepository[Documento] = Depends(get_documento_repository),
):
    update_entity(repo, documento_id, body, "Documento")


@router.delete("/{documento_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    documento_id: int,
    repo: BaseRepository[Documento] = Depends(get_documento_repository),
    clientes: ClienteRepository = Depends(get_cliente_repository),
):
    delete_documento(repo, clientes, documento_id)
