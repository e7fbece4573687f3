from __future__ import annotations

from typing import List

from langchain_qdrant import QdrantVectorStore
from langchain_core.embeddings import Embeddings

from qdrant_client import QdrantClient
from qdrant_client.http import models as rest

from langchain_community.embeddings import OllamaEmbeddings

from ..config import Settings


# -----------------------------
# Gemini Embeddings (google-genai)
# -----------------------------
class GeminiEmbeddings(Embeddings):
    """
    Embeddings through the google-genai SDK, one request per text.
    """

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise ValueError("GEMINI_API_KEY is missing.")
        self.model = model

        from google import genai  # google-genai
        self._client = genai.Client(api_key=api_key)

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        out: List[List[float]] = []
        for t in texts:
            res = self._client.models.embed_content(
                model=self.model,
                contents=t if t is not None else "",
            )
            # `res.embeddings` is a list; each item has `.values`
            out.append(list(res.embeddings[0].values))
        return out

    def embed_query(self, text: str) -> List[float]:
        return self.embed_documents([text])[0]


def build_embeddings(settings: Settings) -> Embeddings:
    provider = (settings.embeddings_provider or "ollama").lower().strip()

    if provider == "gemini":
        return GeminiEmbeddings(
            api_key=settings.gemini_api_key or "",
            model=settings.gemini_embed_model,
        )

    if provider != "ollama":
        raise ValueError(f"Unsupported EMBEDDINGS_PROVIDER: {settings.embeddings_provider!r}")

    return OllamaEmbeddings(
        base_url=settings.ollama_base_url,
        model=settings.ollama_embed_model,
    )


def ensure_collection(client: QdrantClient, collection_name: str, dim: int) -> bool:
    """
    Creates the collection with cosine distance when it is missing.
    Returns True if a collection was created.
    """
    if client.collection_exists(collection_name):
        return False

    client.create_collection(
        collection_name=collection_name,
        vectors_config=rest.VectorParams(
            size=dim,
            distance=rest.Distance.COSINE,
        ),
    )
    return True


def build_vectorstore(settings: Settings, embeddings: Embeddings) -> QdrantVectorStore:
    try:
        dim = len(embeddings.embed_query("dimension probe"))
    except Exception as e:
        raise RuntimeError(
            f"Embedding probe failed. Check embeddings provider + model. "
            f"EMBEDDINGS_PROVIDER={settings.embeddings_provider} "
            f"Original error: {e}"
        ) from e

    client = QdrantClient(url=settings.qdrant_url)
    ensure_collection(client, settings.collection_name, dim)

    return QdrantVectorStore(
        client=client,
        collection_name=settings.collection_name,
        embedding=embeddings,
    )
