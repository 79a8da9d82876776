import os

# Must be set before any app module reads the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.infrastructure.database import Base, get_db
from app.domain.models.cliente import Cliente
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository
from app.infrastructure.repositories.cliente_repository import SQLAlchemyClienteRepository

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def cliente_repo(db_session):
    return SQLAlchemyClienteRepository(db_session, Cliente)


@pytest.fixture
def documento_repo(db_session):
    return SQLAlchemyRepository(db_session, Documento)


@pytest.fixture
def endereco_repo(db_session):
    return SQLAlchemyRepository(db_session, Endereco)


@pytest.fixture
def telefone_repo(db_session):
    return SQLAlchemyRepository(db_session, Telefone)


@pytest.fixture
def ana(cliente_repo):
    """A persisted cliente owning one of each sub-entity kind."""
    cliente = Cliente(
        nome="Ana Silva",
        documentos=[Documento(tipo="CPF", numero="123")],
        endereco=Endereco(cidade="São José dos Campos", rua="Av. Brasil", numero="100", estado="SP"),
        telefones=[Telefone(ddd="12", numero="987654321")],
    )
    return cliente_repo.save(cliente)
