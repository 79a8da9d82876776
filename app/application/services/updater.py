"""
Merge engine used by every update operation.

``merge(target, source)`` copies the mutable fields of an entity kind from an
incoming payload onto the persisted entity, in place. The fields copied per
kind are declared in UPDATABLE_FIELDS; anything not listed there (the id,
Cliente.data_cadastro, the Cliente's owned documentos/endereco/telefones) is
never touched.

Policy: full replace. Every listed field is overwritten, and a field the
source does not carry is written as None. There is no sparse-patch mode.
"""

from typing import Any, Dict, Tuple, Type

from app.domain.models.cliente import Cliente
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone

UPDATABLE_FIELDS: Dict[Type, Tuple[str, ...]] = {
    Cliente: ("nome", "nome_social", "data_nascimento"),
    Documento: ("tipo", "numero"),
    Endereco: (
        "estado",
        "cidade",
        "bairro",
        "rua",
        "numero",
        "codigo_postal",
        "informacoes_adicionais",
    ),
    Telefone: ("ddd", "numero"),
}


def updatable_fields(kind: Type) -> Tuple[str, ...]:
    try:
        return UPDATABLE_FIELDS[kind]
    except KeyError:
        raise TypeError(f"No merge policy registered for {kind.__name__}") from None


def merge(target: Any, source: Any) -> None:
    """Copy the updatable fields of ``target``'s kind from ``source`` onto ``target``.

    ``source`` may be an entity of the same kind or a request schema exposing
    the same attribute names.
    """
    for field in updatable_fields(type(target)):
        setattr(target, field, getattr(source, field, None))
