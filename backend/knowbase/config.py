from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------
    # Service
    # -------------------------
    service_name: str = Field(default="KnowBase RAG System", alias="SERVICE_NAME")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    cors_allow_origins: List[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # -------------------------
    # Vector store
    # -------------------------
    qdrant_url: str = Field(default="http://localhost:6333", alias="QDRANT_URL")
    collection_name: str = Field(default="knowbase_chunks", alias="COLLECTION_NAME")

    # -------------------------
    # Tracking
    # -------------------------
    mlflow_enabled: bool = Field(default=False, alias="MLFLOW_ENABLED")
    mlflow_tracking_uri: str = Field(default="http://localhost:5000", alias="MLFLOW_TRACKING_URI")
    mlflow_experiment: str = Field(default="knowbase", alias="MLFLOW_EXPERIMENT")

    # -------------------------
    # Providers
    # -------------------------
    llm_provider: str = Field(default="ollama", alias="LLM_PROVIDER")  # ollama | gemini
    embeddings_provider: str = Field(default="ollama", alias="EMBEDDINGS_PROVIDER")  # ollama | gemini

    # -------------------------
    # Ollama (local)
    # -------------------------
    ollama_base_url: str = Field(default="http://localhost:11434", alias="OLLAMA_BASE_URL")
    ollama_model: str = Field(default="qwen2.5:7b-instruct", alias="OLLAMA_MODEL")
    ollama_embed_model: str = Field(default="nomic-embed-text", alias="OLLAMA_EMBED_MODEL")

    # -------------------------
    # Gemini
    # -------------------------
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-1.5-flash", alias="GEMINI_MODEL")
    gemini_embed_model: str = Field(default="models/text-embedding-004", alias="GEMINI_EMBED_MODEL")


settings = Settings()
