"""Single-shot chat completion calls against OpenRouter."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, Optional

from openai import OpenAI

from pair_programmer.config import OPENROUTER_BASE_URL
from pair_programmer.models import ModelRegistry, UnknownModelError

logger = logging.getLogger(__name__)

PROVIDER_NAME = "OpenRouter"


class EmptyResponseError(RuntimeError):
    """Raised when the provider answers without any message content."""


class ModelClient:
    """
    Resolve a model nickname and ask the provider for one completion.

    Every failure mode comes back as data: ``{"error": ..., "code": ...}``.
    Successful calls return ``{"text": ...}`` with the model's content as-is.
    """

    def __init__(
        self,
        registry: ModelRegistry,
        api_key: str,
        *,
        base_url: str = OPENROUTER_BASE_URL,
        client: Optional[Any] = None,
    ) -> None:
        self.registry = registry
        self._api_key = api_key
        self._base_url = base_url
        self._client = client

    def _build_client(self) -> ContextManager[Any]:
        """
        Return the injected client as-is, or a fresh OpenAI client for this call.

        A fresh client owns its own connection pool and is closed when the
        `with` block exits; an injected client belongs to the caller and stays open.
        """
        if self._client is not None:
            return nullcontext(self._client)
        # No SDK-level retries: a failed call surfaces once, immediately.
        return OpenAI(api_key=self._api_key, base_url=self._base_url, max_retries=0)

    def call(self, prompt: str, nickname: str, temperature: Optional[float] = None) -> Dict[str, str]:
        """
        Send `prompt` to the model behind `nickname`.

        Parameters
        ----------
        prompt : str
            Full prompt text, sent as a single user message.
        nickname : str
            Registry nickname such as ``"Gemini"``.
        temperature : Optional[float]
            Sampling temperature; the model's default when omitted.

        Returns
        -------
        Dict[str, str]
            {"text": str} or {"error": str, "code": "unknown_model" | "provider_error"}
        """
        try:
            entry = self.registry.resolve(nickname)
        except UnknownModelError as exc:
            return {"error": str(exc), "code": "unknown_model"}

        if temperature is None:
            temperature = entry.default_temperature

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s request - Model: %s (%s), Temperature: %s",
                PROVIDER_NAME,
                nickname,
                entry.provider_model_id,
                temperature,
            )

        try:
            with self._build_client() as client:
                completion = client.chat.completions.create(
                    model=entry.provider_model_id,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=temperature,
                )
            text = _extract_text(completion)
        except Exception as exc:
            error_msg = f"{PROVIDER_NAME} API error: {exc}"
            logger.error(error_msg, exc_info=True)
            return {"error": error_msg, "code": "provider_error"}

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s response received - Length: %d", PROVIDER_NAME, len(text))
        return {"text": text}


def _extract_text(completion: Any) -> str:
    """Pull the first choice's message content out of a completion."""
    choices = getattr(completion, "choices", None)
    if not choices:
        raise EmptyResponseError("response contained no choices")
    content = choices[0].message.content
    if content is None:
        raise EmptyResponseError("response message had no content")
    return content
