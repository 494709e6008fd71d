"""Model nicknames callers can pick from and the provider ids behind them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "Gemini"


@dataclass(frozen=True, slots=True)
class ModelEntry:
    """One selectable model configuration."""

    nickname: str
    provider_model_id: str
    default_temperature: float = 0.3

    def __post_init__(self) -> None:
        if not 0.0 <= self.default_temperature <= 1.0:
            raise ValueError(
                f"Default temperature for '{self.nickname}' must be within [0, 1], "
                f"got {self.default_temperature}"
            )


DEFAULT_MODELS = (
    ModelEntry("O3", "openai/o3"),
    ModelEntry("Gemini", "google/gemini-2.5-pro-preview"),
    ModelEntry("Grok", "x-ai/grok-3-beta"),
    ModelEntry("DeepSeek", "deepseek/deepseek-r1-0528"),
    ModelEntry("Opus", "anthropic/claude-opus-4"),
)


class UnknownModelError(LookupError):
    """Raised when a nickname is not in the registry."""

    def __init__(self, nickname: str, available: List[str]) -> None:
        self.nickname = nickname
        self.available = available
        super().__init__(
            f"Model '{nickname}' not available. Available models: {', '.join(available)}"
        )


class ModelRegistry:
    """Read-only nickname -> ModelEntry table built once at startup."""

    def __init__(self, entries: Iterable[ModelEntry], default: str = DEFAULT_MODEL) -> None:
        table = {}
        for entry in entries:
            if entry.nickname in table:
                raise ValueError(f"Model '{entry.nickname}' is registered twice.")
            table[entry.nickname] = entry
        if default not in table:
            raise ValueError(f"Default model '{default}' is not in the registry.")
        self._models = MappingProxyType(table)
        self.default = default

    def resolve(self, nickname: str) -> ModelEntry:
        """
        Look up a nickname exactly as given (case-sensitive).

        Raises
        ------
        UnknownModelError
            If the nickname is unknown; the message lists every valid nickname.
        """
        try:
            return self._models[nickname]
        except (KeyError, TypeError):
            error = UnknownModelError(nickname, self.names())
            logger.error(str(error))
            raise error from None

    def names(self) -> List[str]:
        """Nicknames in registration order."""
        return list(self._models)

    def __contains__(self, nickname: object) -> bool:
        return nickname in self._models

    def __len__(self) -> int:
        return len(self._models)


DEFAULT_REGISTRY = ModelRegistry(DEFAULT_MODELS)
