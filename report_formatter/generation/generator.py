"""Report text generation with a local Ollama model."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import ollama

from ..config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL_NAME,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_RETRY_BASE_DELAY,
    RETRYABLE_STATUS_CODES,
)
from ..exceptions import InvalidInputError, ModelError
from .prompts import build_report_prompt, fallback_report

logger = logging.getLogger(__name__)


@dataclass
class GeneratedReport:
    """Raw report text plus where it came from."""
    text: str
    used_fallback: bool
    model: str


class ReportGenerator:
    """Generates structured report text, falling back to a placeholder."""

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL_NAME,
        host: str = DEFAULT_OLLAMA_HOST,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_RETRY_BASE_DELAY,
        client: Optional[ollama.Client] = None
    ):
        """Initialize the report generator.

        Args:
            model_name: Name of the Ollama model to use
            host: Ollama server URL
            max_retries: Attempts per request, including the first one
            base_delay: Wait before the first retry, doubled after each attempt
            client: Preconfigured Ollama client
        """
        self.model_name = model_name
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.client = client or ollama.Client(host=host)

    @staticmethod
    def _is_retryable(error: Exception) -> bool:
        if isinstance(error, ollama.ResponseError):
            return error.status_code in RETRYABLE_STATUS_CODES
        return isinstance(error, ConnectionError)

    def complete(self, prompt: str) -> str:
        """Get a single completion, retrying transient failures.

        Args:
            prompt: Prompt text

        Returns:
            Model response text

        Raises:
            ModelError: If the model fails or returns nothing
        """
        for attempt in range(self.max_retries):
            try:
                response = self.client.generate(model=self.model_name, prompt=prompt, stream=False)
                text = response["response"]
            except Exception as e:
                logger.error(f"Generate attempt {attempt + 1} failed: {str(e)}")
                if self._is_retryable(e) and attempt < self.max_retries - 1:
                    wait = self.base_delay * 2 ** attempt
                    logger.info(f"Retrying in {wait:.1f}s...")
                    time.sleep(wait)
                    continue
                raise ModelError(f"Failed to get model response: {str(e)}") from e

            if not text or not text.strip():
                raise ModelError("Empty response from model")
            return text

        raise ModelError("Retries exhausted")

    def generate(self, topic: str, pages: Optional[int] = None, words: Optional[int] = None) -> GeneratedReport:
        """Generate report text for a topic.

        Any model failure is logged and replaced by placeholder text so a
        document can always be produced.

        Args:
            topic: Report subject
            pages: Approximate page count to ask for
            words: Approximate word count to ask for

        Returns:
            Generated report text and whether the fallback was used

        Raises:
            InvalidInputError: If the topic is empty
        """
        if not topic or not topic.strip():
            raise InvalidInputError("No input text provided")

        prompt = build_report_prompt(topic, pages, words)
        logger.info(f"Requesting report on '{topic.strip()}' from {self.model_name}")
        try:
            text = self.complete(prompt)
        except ModelError as e:
            logger.warning(f"Model failed, using fallback content: {str(e)}")
            return GeneratedReport(text=fallback_report(topic), used_fallback=True, model=self.model_name)

        logger.info(f"Received {len(text)} characters from {self.model_name}")
        return GeneratedReport(text=text, used_fallback=False, model=self.model_name)
