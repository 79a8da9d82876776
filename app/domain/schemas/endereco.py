"""Pydantic schemas for Endereco."""

from typing import Annotated, Optional

from pydantic import Field

from app.domain.schemas.common import NonBlankStr, ReadSchemaBase, SchemaBase


class EnderecoBase(SchemaBase):
    estado: Optional[Annotated[str, Field(min_length=2, max_length=2)]] = None
    cidade: NonBlankStr
    bairro: Optional[str] = None
    rua: NonBlankStr
    numero: NonBlankStr
    codigo_postal: Optional[str] = None
    informacoes_adicionais: Optional[str] = None


class EnderecoCreate(EnderecoBase):
    pass


class EnderecoUpdate(EnderecoBase):
    pass


class EnderecoRead(ReadSchemaBase):
    id: int
    estado: Optional[str] = None
    cidade: str
    bairro: Optional[str] = None
    rua: str
    numero: str
    codigo_postal: Optional[str] = None
    informacoes_adicionais: Optional[str] = None
