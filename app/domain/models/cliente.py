"""Cliente domain model — aggregate root, maps to the 'clientes' table."""

from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, autoincrement=True)

    nome = Column(String(100), nullable=False)
    nome_social = Column(String(255), nullable=True)
    data_nascimento = Column(Date, nullable=True)
    data_cadastro = Column(DateTime(timezone=True), nullable=True)

    # Owned sub-entities. Deleting the Cliente deletes them; entities removed
    # from these attributes are deleted by SQLAlchemyClienteRepository.save.
    documentos = relationship(Documento, cascade="all", order_by=Documento.id)
    endereco = relationship(Endereco, cascade="all", uselist=False)
    telefones = relationship(Telefone, cascade="all", order_by=Telefone.id)

    def __repr__(self):
        return f"<Cliente {self.id} - {self.nome}>"
