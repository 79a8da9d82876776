"""Telefone domain model — maps to the 'telefones' table."""

from sqlalchemy import Column, Integer, String, ForeignKey

from app.infrastructure.database import Base


class Telefone(Base):
    __tablename__ = "telefones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ddd = Column(String(3), nullable=False)
    numero = Column(String(9), nullable=False)

    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True, index=True)

    def __repr__(self):
        return f"<Telefone ({self.ddd}) {self.numero}>"
