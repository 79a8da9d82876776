"""Entity service — get/list/create/update flows shared by every entity kind."""

from typing import Any, List, TypeVar

from app.core.exceptions import EntityNotFoundException
from app.domain.repositories.base import BaseRepository
from app.application.services.selector import select
from app.application.services.updater import merge

T = TypeVar("T")


def list_entities(repo: BaseRepository[T]) -> List[T]:
    return repo.list_all()


def get_entity(repo: BaseRepository[T], entity_id: int, label: str) -> T:
    """Select the entity from the full collection; 404 when absent."""
    entity = select(repo.list_all(), entity_id)
    if entity is None:
        raise EntityNotFoundException(f"{label} não encontrado", details={"id": entity_id})
    return entity


def create_entity(repo: BaseRepository[T], entity: T) -> T:
    return repo.save(entity)


def update_entity(repo: BaseRepository[T], entity_id: int, payload: Any, label: str) -> T:
    """Merge ``payload`` onto the persisted entity and save it."""
    entity = repo.get_by_id(entity_id)
    if entity is None:
        raise EntityNotFoundException(f"{label} não encontrado", details={"id": entity_id})
    merge(entity, payload)
    return repo.save(entity)
