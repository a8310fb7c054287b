# Lazily-built chat model shared by every flow; the provider is chosen from settings.
# interview_prep/services/llm_client.py
import threading

from langchain_community.llms import Ollama
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI

from interview_prep.utils.config import settings, validate_provider_settings
from interview_prep.utils.exceptions import ConfigurationError
from interview_prep.utils.logger import logger

# --- Global client (initialized lazily) ---
_llm_client = None
_init_lock = threading.Lock()


def _build_llm():
    provider = settings.llm_provider
    if provider == "google":
        return ChatGoogleGenerativeAI(
            google_api_key=settings.google_api_key,
            model=settings.google_model_name,
            temperature=settings.llm_temperature,
        )
    if provider == "openai":
        return ChatOpenAI(
            api_key=settings.openai_api_key,
            model=settings.openai_model_name,
            temperature=settings.llm_temperature,
        )
    if provider == "ollama":
        return Ollama(base_url=settings.ollama_base_url, model=settings.ollama_model, temperature=settings.llm_temperature)
    raise ValueError(f"Unsupported LLM_PROVIDER: {provider}")


def get_llm():
    """Returns the shared LLM client, creating it on first use."""
    global _llm_client

    if _llm_client is not None:
        return _llm_client

    with _init_lock:
        if _llm_client is None:
            try:
                validate_provider_settings(settings)
                logger.info(f"Initializing LLM client for provider: {settings.llm_provider}")
                _llm_client = _build_llm()
            except ValueError as e:
                logger.error(f"LLM configuration error: {e}")
                raise ConfigurationError("The AI service is not configured.", {"reason": str(e)}) from e
            logger.info(f"Initialized LLM with provider {settings.llm_provider}")
    return _llm_client


def reset_llm() -> None:
    """Drops the cached client so the next call rebuilds it from current settings."""
    global _llm_client
    with _init_lock:
        _llm_client = None
