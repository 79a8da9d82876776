"""
Cliente Repository Interface.
"""

from app.domain.repositories.base import BaseRepository
from app.domain.models.cliente import Cliente


class ClienteRepository(BaseRepository[Cliente]):
    """Interface for the Cliente aggregate.

    save() also deletes every owned Documento, Endereco or Telefone that was
    removed from the Cliente since it was loaded (orphan removal).
    """
