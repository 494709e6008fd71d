"""Free-form collaboration tool: the caller's prompt goes to the model untouched."""

from __future__ import annotations

from typing import Any, Dict

NAME = "pair"
DESCRIPTION = (
    "Collaborate with AI on any topic - ask questions, brainstorm ideas, "
    "or work through problems together"
)

#: Temperature used when the caller does not send one.
DEFAULT_TEMPERATURE = 0.5


def build_pair_prompt(args: Dict[str, Any]) -> str:
    return args["prompt"]
