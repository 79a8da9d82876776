"""Shared pydantic building blocks for the request/response schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Campo obrigatório")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class SchemaBase(BaseModel):
    """camelCase on the wire (nomeSocial, codigoPostal, ...), snake_case in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReadSchemaBase(SchemaBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
