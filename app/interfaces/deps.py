"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.domain.models.cliente import Cliente
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone
from app.domain.repositories.base import BaseRepository
from app.domain.repositories.cliente_repository import ClienteRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository
from app.infrastructure.repositories.cliente_repository import SQLAlchemyClienteRepository
from app.infrastructure.database import get_db


def get_cliente_repository(db: Session = Depends(get_db)) -> ClienteRepository:
    """Get cliente repository instance."""
    return SQLAlchemyClienteRepository(db, Cliente)


def get_documento_repository(db: Session = Depends(get_db)) -> BaseRepository[Documento]:
    return SQLAlchemyRepository(db, Documento)


def get_endereco_repository(db: Session = Depends(get_db)) -> BaseRepository[Endereco]:
    return SQLAlchemyRepository(db, Endereco)


def get_telefone_repository(db: Session = Depends(get_db)) -> BaseRepository[Telefone]:
    return SQLAlchemyRepository(db, Telefone)
