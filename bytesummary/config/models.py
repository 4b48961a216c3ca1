"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("bytesummary", description="Database name")
    user: str = Field("bytesummary", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")
    pool_max_size: int = Field(10, ge=1, le=100, description="Maximum pooled connections")


class StoreConfig(BaseModel):
    """Key-value store configuration."""

    backend: str = Field("postgres", description="Store backend (postgres, memory)")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Only known backends are accepted."""
        if v not in ("postgres", "memory"):
            raise ValueError(f"Unknown store backend: {v}")
        return v


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, mock)")
    model: str = Field("gpt-4o-mini", description="Model name")
    api_key_env: Optional[str] = Field("OPENAI_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for API (e.g., for Ollama)")
    max_tokens: int = Field(800, description="Max tokens per summary", ge=50, le=8000)


class FetchConfig(BaseModel):
    """Outbound HTTP configuration."""

    timeout: float = Field(30.0, description="Request timeout in seconds", gt=0)
    user_agent: Optional[str] = Field(None, description="Override the browser User-Agent")


class PipelineConfig(BaseModel):
    """Processing limits and retention."""

    max_articles_per_source: int = Field(5, ge=1, le=100)
    min_content_length: int = Field(200, ge=0)
    index_limit: int = Field(100, ge=1, le=1000)
    blog_ttl_days: int = Field(30, ge=1)
    job_ttl_hours: int = Field(24, ge=1)


class ServerConfig(BaseModel):
    """API server configuration."""

    host: str = Field("127.0.0.1", description="Bind address")
    port: int = Field(8787, description="Bind port")


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
