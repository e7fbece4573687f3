import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .api.routes.chat import router as chat_router
from .api.routes.health import router as health_router
from .api.routes.upload import router as upload_router
from .services.chat_service import ChatService
from .services.chunker import CHUNK_OVERLAP, CHUNK_SIZE
from .services.document_service import DocumentService
from .services.llm import LLMClient
from .services.mlflow_logger import MlflowIngestTracker, setup_mlflow
from .services.vectorstore import build_embeddings, build_vectorstore

log = logging.getLogger("knowbase")


def wire_services(app: FastAPI, settings: Settings) -> None:
    """Builds whichever orchestrators were not injected into create_app."""
    vector_store = build_vectorstore(settings, build_embeddings(settings))

    if app.state.chat_service is None:
        app.state.chat_service = ChatService(vector_store, LLMClient(settings))

    if app.state.document_service is None:
        tracker = None
        if settings.mlflow_enabled:
            setup_mlflow(settings.mlflow_tracking_uri, settings.mlflow_experiment)
            tracker = MlflowIngestTracker(
                collection=settings.collection_name,
                chunk_size=CHUNK_SIZE,
                chunk_overlap=CHUNK_OVERLAP,
            )
        app.state.document_service = DocumentService(vector_store, tracker=tracker)

    log.info(
        "services ready qdrant=%s collection=%s llm=%s embeddings=%s",
        settings.qdrant_url,
        settings.collection_name,
        settings.llm_provider,
        settings.embeddings_provider,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.chat_service is None or app.state.document_service is None:
        wire_services(app, app.state.settings)
    yield


def create_app(
    settings: Optional[Settings] = None,
    *,
    chat_service: Optional[ChatService] = None,
    document_service: Optional[DocumentService] = None,
) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.service_name, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.chat_service = chat_service
    app.state.document_service = document_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix=settings.api_prefix, tags=["health"])
    app.include_router(upload_router, prefix=settings.api_prefix, tags=["documents"])
    app.include_router(chat_router, prefix=settings.api_prefix, tags=["chat"])

    return app


app = create_app()
