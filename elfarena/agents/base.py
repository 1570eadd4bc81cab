"""Shared plumbing for LLM agents that answer in JSON."""

import logging
from typing import Optional, TypeVar

from langchain.chat_models import BaseChatModel
from pydantic import BaseModel

from elfarena.agents.output_validator import OutputValidator
from elfarena.settings.llm_config import LLMConfig, LLMConfigManager

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class JSONGenerationAgent:
    """Invokes a chat model and validates its JSON reply.

    Failures never propagate: they are logged with the raw reply and the
    caller receives None to substitute its own fallback.
    """

    agent_name = "Generator"
    default_temperature: Optional[float] = None

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        config: Optional[LLMConfig] = None,
    ) -> None:
        """
        Initialize the agent.

        Args:
            llm: LangChain chat model (if None, built from `config`)
            config: LLM config used when `llm` is not given
        """
        self.validator = OutputValidator()
        if llm is None:
            config_manager = LLMConfigManager(initial_config=config)
            if config is None and self.default_temperature is not None:
                config_manager = config_manager.with_temperature(self.default_temperature)
            self.llm = config_manager.get_llm()
        else:
            self.llm = llm

    def _invoke(self, messages: list) -> Optional[str]:
        """Call the model and return its text, or None if the call failed."""
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logger.warning(f"{self.agent_name} LLM call failed: {e}")
            return None

        content = response.content if hasattr(response, "content") else str(response)
        if isinstance(content, list):
            # Handle content blocks
            content = " ".join(str(item) for item in content)
        return content

    def _generate(self, messages: list, schema: type[T]) -> Optional[T]:
        """Invoke the model and validate the reply against `schema`."""
        content = self._invoke(messages)
        if content is None:
            return None

        is_valid, parsed, error = self.validator.validate(content, schema)
        if not is_valid:
            logger.warning(f"{self.agent_name} returned unusable output: {error}. Raw LLM response: {content!r}")
            return None
        return parsed
