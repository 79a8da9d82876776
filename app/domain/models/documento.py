"""Documento domain model — maps to the 'documentos' table."""

from sqlalchemy import Column, Integer, String, ForeignKey

from app.infrastructure.database import Base


class Documento(Base):
    __tablename__ = "documentos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo = Column(String(50), nullable=False)
    numero = Column(String(50), unique=True, nullable=False, index=True)

    # Owner; NULL while the documento is not attached to any Cliente
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True, index=True)

    def __repr__(self):
        return f"<Documento {self.tipo} - {self.numero}>"
