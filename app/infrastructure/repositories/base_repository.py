"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session
from app.domain.repositories.base import BaseRepository
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models.

    Each save/delete commits its own transaction.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def list_all(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.query(self.model).filter(self.model.id == id).first()

    def exists_by_id(self, id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def save(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: ModelType) -> None:
        self.db.delete(obj)
        self.db.commit()

    def delete_by_id(self, id: int) -> None:
        obj = self.db.get(self.model, id)
        if obj:
            self.delete(obj)
