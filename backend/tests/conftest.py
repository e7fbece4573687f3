"""Shared fixtures: fake collaborators for the orchestrators and the app."""

from typing import List, Tuple
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from langchain_core.documents import Document

from knowbase.config import Settings
from knowbase.main import create_app
from knowbase.services.chat_service import ChatService
from knowbase.services.document_service import DocumentService
from knowbase.services.llm import LLMClient


def retrieved(*chunks: Tuple[str, str, int], score: float = 0.9) -> List[Tuple[Document, float]]:
    """Builds (Document, score) pairs from (text, source, chunk_index) tuples."""
    return [
        (Document(page_content=text, metadata={"source": source, "chunk_index": idx}), score)
        for text, source, idx in chunks
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def vector_store() -> Mock:
    store = Mock()
    store.similarity_search_with_score.return_value = []
    store.add_documents.side_effect = lambda docs: [str(i) for i in range(len(docs))]
    return store


@pytest.fixture
def llm() -> Mock:
    client = Mock(spec=LLMClient)
    client.generate.return_value = "generated answer"
    return client


@pytest.fixture
def chat_service(vector_store, llm) -> ChatService:
    return ChatService(vector_store, llm)


@pytest.fixture
def document_service(vector_store) -> DocumentService:
    return DocumentService(vector_store)


@pytest.fixture
def client(settings, chat_service, document_service) -> TestClient:
    app = create_app(settings, chat_service=chat_service, document_service=document_service)
    return TestClient(app)
