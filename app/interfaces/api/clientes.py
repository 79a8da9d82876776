"""Cliente API routes — CRUD for the aggregate and attachment of owned entities."""

from fastapi import APIRouter, Depends, status

from app.interfaces.deps import get_cliente_repository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.domain.schemas.cliente import ClienteCreate, ClienteRead, ClienteUpdate
from app.domain.schemas.documento import DocumentoCreate, DocumentoRead
from app.domain.schemas.endereco import EnderecoCreate, EnderecoRead
from app.domain.schemas.telefone import TelefoneCreate, TelefoneRead
from app.application.services.entity_service import get_entity, list_entities, update_entity
from app.application.services.cliente_service import (
    create_cliente,
    delete_cliente,
    add_documento,
    add_telefone,
    set_endereco,
)

router = APIRouter(prefix="/cliente", tags=["Cliente"])


@router.get("", response_model=list[ClienteRead])
def list_clientes(repo: ClienteRepository = Depends(get_cliente_repository)):
    """List every cliente with its documentos, endereco and telefones."""
    return list_entities(repo)


@router.get("/{cliente_id}", response_model=ClienteRead)
def get_cliente(cliente_id: int, repo: ClienteRepository = Depends(get_cliente_repository)):
    return get_entity(repo, cliente_id, "Cliente")


@router.post("", response_model=ClienteRead, status_code=status.HTTP_201_CREATED)
def create(body: ClienteCreate, repo: ClienteRepository = Depends(get_cliente_repository)):
    return create_cliente(repo, body)


@router.put("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def update(cliente_id: int, body: ClienteUpdate, repo: ClienteRepository = Depends(get_cliente_repository)):
    """Replace nome, nomeSocial and dataNascimento. dataCadastro and owned entities are kept."""
    update_entity(repo, cliente_id, body, "Cliente")


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(cliente_id: int, repo: ClienteRepository = Depends(get_cliente_repository)):
    delete_cliente(repo, cliente_id)


@router.post("/{cliente_id}/documentos", response_model=DocumentoRead, status_code=status.HTTP_201_CREATED)
def create_documento_for_cliente(
    cliente_id: int,
    body: DocumentoCreate,
    repo: ClienteRepository = Depends(get_cliente_repository),
):
    return add_documento(repo, cliente_id, body)


@router.post("/{cliente_id}/telefones", response_model=TelefoneRead, status_code=status.HTTP_201_CREATED)
def create_telefone_for_cliente(
    cliente_id: int,
    body: TelefoneCreate,
    repo: ClienteRepository = Depends(get_cliente_repository),
):
    return add_telefone(repo, cliente_id, body)


@router.put("/{cliente_id}/endereco", response_model=EnderecoRead)
def replace_endereco_of_cliente(
    cliente_id: int,
    body: EnderecoCreate,
    repo: ClienteRepository = Depends(get_cliente_repository),
):
    return set_endereco(repo, cliente_id, body)
