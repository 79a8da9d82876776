"""Pydantic schemas for Documento."""

from app.domain.schemas.common import NonBlankStr, ReadSchemaBase, SchemaBase


class DocumentoBase(SchemaBase):
    tipo: NonBlankStr
    numero: NonBlankStr


class DocumentoCreate(DocumentoBase):
    pass


class DocumentoUpdate(DocumentoBase):
    pass


class DocumentoRead(ReadSchemaBase):
    id: int
    tipo: str
    numero: str
