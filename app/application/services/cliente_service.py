"""Cliente service — aggregate creation, deletion and attachment of owned entities."""

from datetime import datetime

import pytz
import structlog

from app.config import get_settings
from app.core.exceptions import EntityNotFoundException
from app.domain.models.cliente import Cliente
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone
from app.domain.repositories.cliente_repository import ClienteRepository
from app.domain.schemas.cliente import ClienteCreate
from app.domain.schemas.documento import DocumentoCreate
from app.domain.schemas.endereco import EnderecoCreate
from app.domain.schemas.telefone import TelefoneCreate

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)


def get_current_datetime() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(tz)


def _get_cliente_or_404(repo: ClienteRepository, cliente_id: int) -> Cliente:
    cliente = repo.get_by_id(cliente_id)
    if cliente is None:
        raise EntityNotFoundException("Cliente não encontrado", details={"id": cliente_id})
    return cliente


def create_cliente(repo: ClienteRepository, body: ClienteCreate) -> Cliente:
    """Persist a Cliente together with the documentos, endereco and telefones in the body.

    dataCadastro is always stamped here.
    """
    cliente = Cliente(
        nome=body.nome,
        nome_social=body.nome_social,
        data_nascimento=body.data_nascimento,
        data_cadastro=get_current_datetime(),
        documentos=[Documento(**documento.model_dump()) for documento in body.documentos],
        endereco=Endereco(**body.endereco.model_dump()) if body.endereco else None,
        telefones=[Telefone(**telefone.model_dump()) for telefone in body.telefones],
    )
    cliente = repo.save(cliente)
    logger.info("Cliente created", cliente_id=cliente.id)
    return cliente


def delete_cliente(repo: ClienteRepository, cliente_id: int) -> None:
    """Delete a Cliente; its owned entities go with it."""
    cliente = _get_cliente_or_404(repo, cliente_id)
    repo.delete(cliente)
    logger.info("Cliente deleted", cliente_id=cliente_id)


def add_documento(repo: ClienteRepository, cliente_id: int, body: DocumentoCreate) -> Documento:
    cliente = _get_cliente_or_404(repo, cliente_id)
    documento = Documento(**body.model_dump())
    cliente.documentos.append(documento)
    repo.save(cliente)
    logger.info("Documento attached to cliente", cliente_id=cliente_id, documento_id=documento.id)
    return documento


def add_telefone(repo: ClienteRepository, cliente_id: int, body: TelefoneCreate) -> Telefone:
    cliente = _get_cliente_or_404(repo, cliente_id)
    telefone = Telefone(**body.model_dump())
    cliente.telefones.append(telefone)
    repo.save(cliente)
    logger.info("Telefone attached to cliente", cliente_id=cliente_id, telefone_id=telefone.id)
    return telefone


def set_endereco(repo: ClienteRepository, cliente_id: int, body: EnderecoCreate) -> Endereco:
    """Give the Cliente a new endereco. A previous one is deleted as an orphan."""
    cliente = _get_cliente_or_404(repo, cliente_id)
    if cliente.endereco is not None:
        # Separate commit: the old row still holds the unique cliente_id
        cliente.endereco = None
        repo.save(cliente)
    endereco = Endereco(**body.model_dump())
    cliente.endereco = endereco
    repo.save(cliente)
    logger.info("Endereco set on cliente", cliente_id=cliente_id, endereco_id=endereco.id)
    return endereco
