"""
Ownership service — keeps every Documento, Endereco and Telefone owned by at
most one Cliente when a sub-entity is deleted through its own endpoint.

The owner is found by scanning every Cliente. Detaching the sub-entity and
saving the owner deletes it through orphan removal; a sub-entity nobody owns
is deleted directly. The per-Cliente saves are separate commits, so a store
failure half-way leaves the earlier Clientes saved.
"""

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.application.services.selector import select

logger = structlog.get_logger(__name__)


def _detach_from_collections(
    repo: BaseRepository,
    clientes: ClienteRepository,
    entity_id: int,
    attribute: str,
    label: str,
) -> None:
    if not repo.exists_by_id(entity_id):
        raise EntityNotFoundException(f"{label} não encontrado", details={"id": entity_id})

    detached = False
    for cliente in clientes.list_all():
        collection = getattr(cliente, attribute)
        removed = False
        owned = select(collection, entity_id)
        while owned is not None:
            collection.remove(owned)
            removed = True
            owned = select(collection, entity_id)
        if removed:
            logger.info(f"{label} detached from cliente", entity_id=entity_id, cliente_id=cliente.id)
            clientes.save(cliente)
            detached = True

    if not detached:
        logger.info(f"Deleting unowned {label.lower()}", entity_id=entity_id)
        repo.delete_by_id(entity_id)


def delete_documento(repo: BaseRepository[Documento], clientes: ClienteRepository, documento_id: int) -> None:
    """Delete a documento, detaching it from its owner first."""
    _detach_from_collections(repo, clientes, documento_id, "documentos", "Documento")


def delete_telefone(repo: BaseRepository[Telefone], clientes: ClienteRepository, telefone_id: int) -> None:
    """Delete a telefone, detaching it from its owner first."""
    _detach_from_collections(repo, clientes, telefone_id, "telefones", "Telefone")


def delete_endereco(repo: BaseRepository[Endereco], clientes: ClienteRepository, endereco_id: int) -> None:
    """Delete an endereco, clearing it from its owner first."""
    if not repo.exists_by_id(endereco_id):
        raise EntityNotFoundException("Endereço não encontrado", details={"id": endereco_id})

    detached = False
    for cliente in clientes.list_all():
        if cliente.endereco is not None and cliente.endereco.id == endereco_id:
            cliente.endereco = None
            logger.info("Endereco detached from cliente", entity_id=endereco_id, cliente_id=cliente.id)
            clientes.save(cliente)
            detached = True

    if not detached:
        logger.info("Deleting unowned endereco", entity_id=endereco_id)
        repo.delete_by_id(endereco_id)
