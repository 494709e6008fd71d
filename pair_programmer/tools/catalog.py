"""Assembly of the five tools the server exposes."""

from __future__ import annotations

from pair_programmer.models import ModelRegistry
from pair_programmer.tools import FLOAT, STRING, ArgumentField, ToolRegistry, ToolSpec
from pair_programmer.tools import brainstorm_tool, pair_tool, review_tool


def _model_field(models: ModelRegistry) -> ArgumentField:
    return ArgumentField(
        name="model",
        type=STRING,
        required=False,
        description=f"Model to use: {', '.join(models.names())}",
        default=models.default,
    )


def _code_fields(code_description: str, context_description: str, models: ModelRegistry):
    return (
        ArgumentField("code", STRING, True, code_description),
        ArgumentField("context", STRING, False, context_description, default=""),
        _model_field(models),
    )


def build_tool_registry(models: ModelRegistry) -> ToolRegistry:
    """Build the registry of every tool, in the order they are listed to clients."""
    return ToolRegistry(
        [
            ToolSpec(
                name=pair_tool.NAME,
                description=pair_tool.DESCRIPTION,
                fields=(
                    ArgumentField("prompt", STRING, True, "Your question or topic to discuss"),
                    _model_field(models),
                    ArgumentField(
                        "temperature",
                        FLOAT,
                        False,
                        "Response creativity (0.0-1.0)",
                        default=pair_tool.DEFAULT_TEMPERATURE,
                    ),
                ),
                build_prompt=pair_tool.build_pair_prompt,
            ),
            ToolSpec(
                name=review_tool.REVIEW,
                description=review_tool.REVIEW_DESCRIPTION,
                fields=_code_fields(
                    "Code to review",
                    "Additional context about the code",
                    models,
                ),
                build_prompt=review_tool.build_review_prompt,
                temperature=review_tool.REVIEW_TEMPERATURE,
            ),
            ToolSpec(
                name=brainstorm_tool.NAME,
                description=brainstorm_tool.DESCRIPTION,
                fields=(
                    ArgumentField("topic", STRING, True, "Topic to brainstorm about"),
                    ArgumentField(
                        "constraints", STRING, False, "Any constraints or requirements", default=""
                    ),
                    _model_field(models),
                ),
                build_prompt=brainstorm_tool.build_brainstorm_prompt,
                temperature=brainstorm_tool.TEMPERATURE,
            ),
            ToolSpec(
                name=review_tool.PERFORMANCE,
                description=review_tool.PERFORMANCE_DESCRIPTION,
                fields=_code_fields(
                    "Code to analyze for performance",
                    "Context about expected usage patterns",
                    models,
                ),
                build_prompt=review_tool.build_performance_prompt,
                temperature=review_tool.PERFORMANCE_TEMPERATURE,
            ),
            ToolSpec(
                name=review_tool.SECURITY,
                description=review_tool.SECURITY_DESCRIPTION,
                fields=_code_fields(
                    "Code to analyze for security issues",
                    "Security context or requirements",
                    models,
                ),
                build_prompt=review_tool.build_security_prompt,
                temperature=review_tool.SECURITY_TEMPERATURE,
            ),
        ]
    )
