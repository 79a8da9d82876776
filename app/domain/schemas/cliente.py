"""Pydantic schemas for the Cliente aggregate."""

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import Field, PastDate

from app.domain.schemas.common import NonBlankStr, ReadSchemaBase, SchemaBase
from app.domain.schemas.documento import DocumentoCreate, DocumentoRead
from app.domain.schemas.endereco import EnderecoCreate, EnderecoRead
from app.domain.schemas.telefone import TelefoneCreate, TelefoneRead


class ClienteBase(SchemaBase):
    nome: Annotated[NonBlankStr, Field(min_length=3, max_length=100)]
    nome_social: Optional[str] = None
    data_nascimento: Optional[PastDate] = None


class ClienteCreate(ClienteBase):
    documentos: list[DocumentoCreate] = []
    endereco: Optional[EnderecoCreate] = None
    telefones: list[TelefoneCreate] = []


class ClienteUpdate(ClienteBase):
    # Nested documentos/endereco/telefones in the body are ignored; they are
    # managed through their own endpoints.
    pass


class ClienteRead(ReadSchemaBase):
    id: int
    nome: str
    nome_social: Optional[str] = None
    data_nascimento: Optional[date] = None
    data_cadastro: Optional[datetime] = None
    documentos: list[DocumentoRead] = []
    endereco: Optional[EnderecoRead] = None
    telefones: list[TelefoneRead] = []
