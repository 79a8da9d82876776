"""Pydantic schemas for Telefone."""

from typing import Annotated

from pydantic import Field

from app.domain.schemas.common import ReadSchemaBase, SchemaBase

Ddd = Annotated[str, Field(pattern=r"^[0-9]{2,3}$")]
NumeroTelefone = Annotated[str, Field(pattern=r"^[0-9]{8,9}$")]


class TelefoneBase(SchemaBase):
    ddd: Ddd
    numero: NumeroTelefone


class TelefoneCreate(TelefoneBase):
    pass


class TelefoneUpdate(TelefoneBase):
    pass


class TelefoneRead(ReadSchemaBase):
    id: int
    ddd: str
    numero: str
