"""
Environment-based configuration management for ServiceBay.

Uses pydantic-settings to load configuration values from environment
variables and .env files. The NLU service and its tooling import their
settings from this module to ensure consistent configuration handling.

All environment variables are prefixed with ``SB_`` to avoid collisions.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``SB_``-prefixed environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render log lines as JSON (console renderer otherwise).
        spacy_model: spaCy pipeline used for tokens, POS tags and NER.
        sentiment_model: Hugging Face model for per-sentence sentiment.
        sentiment_enabled: Whether sentence sentiment is computed at all.
        api_host: Bind address for the NLU service.
        nlu_port: Bind port for the NLU service.
    """

    model_config = SettingsConfigDict(
        env_prefix="SB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Logging level.")
    log_json: bool = Field(default=True, description="Emit JSON log lines.")

    # ── Annotation ──
    spacy_model: str = Field(
        default="en_core_web_sm",
        description="spaCy pipeline name for tokenization, tagging and NER.",
    )
    sentiment_model: str = Field(
        default="nlptown/bert-base-multilingual-uncased-sentiment",
        description="Five-class sentiment model (1-5 stars).",
    )
    sentiment_enabled: bool = Field(
        default=True,
        description="Run the sentence sentiment model.",
    )

    # ── API ──
    api_host: str = Field(default="0.0.0.0", description="NLU service bind address.")
    nlu_port: int = Field(default=8010, ge=1, le=65535, description="NLU service bind port.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    Returns:
        The global ``Settings`` instance.
    """
    return Settings()
