"""
LLM Provider interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: str
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate_json(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
    ) -> LLMResponse:
        """
        Generate a schema-constrained JSON completion.

        Args:
            prompt: Full user prompt text
            response_schema: JSON schema the completion must conform to
            model: Model identifier, provider default when omitted

        Returns:
            LLMResponse whose content is the JSON-encoded completion text

        Raises:
            UpstreamError: The provider could not be reached or returned an error status
            ResponseFormatError: The provider reply did not have the expected shape
        """
        pass

    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs."""
        return True
