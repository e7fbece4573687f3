from fastapi import Request

from .config import Settings
from .services.chat_service import ChatService
from .services.document_service import DocumentService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


def get_document_service(request: Request) -> DocumentService:
    return request.app.state.document_service
