"""LLM configuration and management."""

import logging
from typing import Literal, Optional

from langchain.chat_models import BaseChatModel
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field

from elfarena.config import (
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_NUM_CTX,
    DEFAULT_LLM_PROVIDER,
    DEFAULT_LLM_TEMPERATURE,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OPENAI_API_KEY,
    DEFAULT_OPENAI_BASE_URL,
)

logger = logging.getLogger(__name__)


class LLMConfig(BaseModel):
    """LLM configuration model."""

    provider: Literal["openai", "ollama"] = Field(
        default=DEFAULT_LLM_PROVIDER, description="LLM provider"
    )
    api_key: Optional[str] = Field(default=None, description="API key for OpenAI")
    base_url: Optional[str] = Field(
        default=None, description="Base URL (for Ollama or custom OpenAI endpoints)"
    )
    model: str = Field(default=DEFAULT_LLM_MODEL, description="Model name")
    temperature: float = Field(
        default=DEFAULT_LLM_TEMPERATURE, ge=0.0, le=2.0, description="Temperature"
    )
    max_tokens: Optional[int] = Field(default=None, ge=1, description="Max tokens")
    timeout: int = Field(default=DEFAULT_LLM_TIMEOUT, ge=1, description="Timeout in seconds")


class LLMConfigManager:
    """Manages LLM configuration and hot-reload."""

    def __init__(self, initial_config: Optional[LLMConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or LLMConfig()
        self._llm_instance: Optional[BaseChatModel] = None
        # LLM is built on first use so the game can start without a running server

    @property
    def config(self) -> LLMConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: LLMConfig) -> None:
        """Update configuration and recreate LLM instance."""
        self._config = new_config
        self._update_llm()

    def with_temperature(self, temperature: float) -> "LLMConfigManager":
        """Return a manager for the same endpoint with a different temperature."""
        return LLMConfigManager(self._config.model_copy(update={"temperature": temperature}))

    def get_llm(self) -> BaseChatModel:
        """Get current LLM instance."""
        if self._llm_instance is None:
            self._update_llm()
        return self._llm_instance

    def _update_llm(self) -> None:
        """Update LLM instance based on current config."""

        kwargs = {
            "model": self._config.model,
            "temperature": self._config.temperature,
        }

        if self._config.provider == "ollama":
            kwargs["base_url"] = (self._config.base_url or DEFAULT_OLLAMA_BASE_URL).rstrip("/")
            kwargs["num_ctx"] = DEFAULT_LLM_NUM_CTX
            kwargs["client_kwargs"] = {"timeout": self._config.timeout}
            if self._config.max_tokens:
                kwargs["num_predict"] = self._config.max_tokens
            self._llm_instance = ChatOllama(**kwargs)
            logger.debug(f"Created Ollama chat model {self._config.model} at {kwargs['base_url']}")
            return

        kwargs["timeout"] = self._config.timeout
        if self._config.max_tokens:
            kwargs["max_tokens"] = self._config.max_tokens
        # Only set api_key if provided (allows OPENAI_API_KEY environment fallback)
        api_key = self._config.api_key or DEFAULT_OPENAI_API_KEY
        if api_key:
            kwargs["api_key"] = api_key
        base_url = self._config.base_url or DEFAULT_OPENAI_BASE_URL
        if base_url:
            kwargs["base_url"] = base_url
        self._llm_instance = ChatOpenAI(**kwargs)
        logger.debug(f"Created OpenAI chat model {self._config.model}")
