"""Endereco domain model — maps to the 'enderecos' table."""

from sqlalchemy import Column, Integer, String, ForeignKey

from app.infrastructure.database import Base


class Endereco(Base):
    __tablename__ = "enderecos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    estado = Column(String(2), nullable=True)
    cidade = Column(String(200), nullable=False)
    bairro = Column(String(200), nullable=True)
    rua = Column(String(300), nullable=False)
    numero = Column(String(20), nullable=False)
    codigo_postal = Column(String(20), nullable=True)
    informacoes_adicionais = Column(String(500), nullable=True)

    # A Cliente owns at most one endereco
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True, unique=True)

    def __repr__(self):
        return f"<Endereco {self.rua}, {self.numero} - {self.cidade}>"
