"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import setup_exception_handlers

# Import all models so SQLAlchemy knows about them
from app.domain.models.cliente import Cliente
from app.domain.models.documento import Documento
from app.domain.models.endereco import Endereco
from app.domain.models.telefone import Telefone

# Import routers
from app.interfaces.api.clientes import router as clientes_router
from app.interfaces.api.documentos import router as documentos_router
from app.interfaces.api.enderecos import router as enderecos_router
from app.interfaces.api.telefones import router as telefones_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Automanager API...", env=settings.ENVIRONMENT)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("Automanager API stopped")


app = FastAPI(
    title="Automanager API",
    description="API de cadastro de clientes, documentos, endereços e telefones.",
    version="1.0.0",
    lifespan=lifespan,
)

# Request id + request logging
setup_middleware(app)

setup_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(clientes_router)
app.include_router(documentos_router)
app.include_router(enderecos_router)
app.include_router(telefones_router)


@app.get("/")
def root():
    return {
        "name": "Automanager API",
        "description": "API de cadastro de clientes, documentos, endereços e telefones.",
        "version": "1.0.0",
        "docs": "/docs",
        "_links": {
            "self": {"href": "/"},
            "clientes": {"href": clientes_router.prefix},
            "enderecos": {"href": enderecos_router.prefix},
            "documentos": {"href": documentos_router.prefix},
            "telefones": {"href": telefones_router.prefix},
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
