"""Validates generator outputs against Pydantic schemas."""

import json
import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class OutputValidator:
    """Parses LLM text into JSON and validates it against Pydantic schemas."""

    @staticmethod
    def extract_json(output: str) -> Any:
        """
        Parse JSON from an LLM reply.
        Handles ```json fenced blocks and prose around a single JSON object.

        Raises:
            json.JSONDecodeError: If no JSON can be recovered
        """
        content = output.strip()
        if content.startswith("```"):
            # Extract JSON from code block
            lines = content.split("\n")
            json_lines = [line for line in lines if not line.strip().startswith("```")]
            content = "\n".join(json_lines).strip()

        try:
            return json.loads(content)
        except json.JSONDecodeError:
            start = content.find("{")
            end = content.rfind("}")
            if start == -1 or end <= start:
                raise
            return json.loads(content[start : end + 1])

    def validate(
        self,
        output: Any,
        schema: type[T],
        strict: bool = True,
    ) -> tuple[bool, Optional[T], Optional[str]]:
        """
        Validate output against Pydantic schema.
        Returns (is_valid, parsed_output, error_message).
        """
        try:
            if strict and not isinstance(output, dict):
                if not isinstance(output, str):
                    return False, None, f"Output is not text or a mapping: {type(output).__name__}"
                try:
                    output = self.extract_json(output)
                except json.JSONDecodeError:
                    return False, None, f"Output is not valid JSON: {output[:100]}"

            # Validate against schema
            parsed = schema.model_validate(output)
            return True, parsed, None

        except ValidationError as e:
            error_msg = f"Validation failed: {e.errors()}"
            logger.warning(f"Output validation failed: {error_msg}")
            return False, None, error_msg
