"""
SQLAlchemy Implementation of Cliente Repository.
"""

import structlog
from sqlalchemy import inspect

from app.domain.models.cliente import Cliente
from app.domain.repositories.cliente_repository import ClienteRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)

OWNED_RELATIONSHIPS = ("documentos", "endereco", "telefones")


class SQLAlchemyClienteRepository(SQLAlchemyRepository[Cliente], ClienteRepository):
    """Cliente repository with orphan removal on save."""

    def save(self, obj: Cliente) -> Cliente:
        state = inspect(obj)
        for name in OWNED_RELATIONSHIPS:
            for orphan in state.attrs[name].history.deleted:
                if orphan is None or not inspect(orphan).persistent:
                    continue
                logger.info(
                    "Removing orphaned entity",
                    cliente_id=obj.id,
                    relationship=name,
                    entity=repr(orphan),
                )
                self.db.delete(orphan)
        return super().save(obj)
