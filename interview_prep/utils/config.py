# interview_prep/utils/config.py
import os
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings
load_dotenv()


class Settings(BaseSettings):
    # --- LLM Provider Configuration ---
    llm_provider: str = os.getenv("LLM_PROVIDER", "google").lower()
    llm_temperature: float = 0.2

    # Google Gemini specific
    google_api_key: str | None = os.getenv("GOOGLE_API_KEY")
    google_model_name: str = os.getenv("GOOGLE_MODEL_NAME", "gemini-2.0-flash")

    # OpenAI specific
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    openai_model_name: str = os.getenv("OPENAI_MODEL_NAME", "gpt-4o-mini")

    # Ollama specific
    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "mistral")

    # Text-to-speech (always served by Gemini)
    tts_model_name: str = os.getenv("TTS_MODEL_NAME", "gemini-2.5-flash-preview-tts")
    tts_voice_name: str = "Algenib"
    tts_sample_rate: int = 24000
    tts_channels: int = 1
    tts_sample_width: int = 2  # bytes per sample

    # Assessment
    weak_score_threshold: int = 70  # answers scoring below this get a learning plan offer

    # Uploads
    max_upload_size_mb: int = 10

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API / UI wiring
    api_base_url: str = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
    request_timeout_s: float = 120.0
    cors_allow_origins: List[str] = ["*"]

    @field_validator("llm_provider", mode="before")
    @classmethod
    def lower_provider(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    class Config:
        env_file = '.env'
        env_file_encoding = 'utf-8'
        extra = 'ignore'


settings = Settings()


def validate_provider_settings(cfg: Settings = settings) -> None:
    """Raises ValueError when the selected provider is missing its credentials."""
    if cfg.llm_provider == "google" and not cfg.google_api_key:
        raise ValueError("LLM_PROVIDER is 'google' but GOOGLE_API_KEY is not set in .env")
    if cfg.llm_provider == "openai" and not cfg.openai_api_key:
        raise ValueError("LLM_PROVIDER is 'openai' but OPENAI_API_KEY is not set in .env")
    if cfg.llm_provider not in ("google", "openai", "ollama"):
        raise ValueError(f"Unsupported LLM_PROVIDER: {cfg.llm_provider}")
