"""Validate tool invocations against their schema and run them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pair_programmer.llm_client import ModelClient
from pair_programmer.tools import FLOAT, STRING, ArgumentField, ToolRegistry, ToolSpec, UnknownToolError

logger = logging.getLogger(__name__)

UNKNOWN_TOOL = "unknown_tool"
INVALID_REQUEST = "invalid_request"
MISSING_ARGUMENT = "missing_argument"
INVALID_ARGUMENT_TYPE = "invalid_argument_type"


class ArgumentError(ValueError):
    """A schema violation in the caller's arguments."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def error_result(code: str, message: str) -> Dict[str, str]:
    return {"error": message, "code": code}


class Dispatcher:
    """
    Route one invocation to its tool: RESOLVE -> VALIDATE -> EXECUTE -> RESPOND.

    Holds no per-call state, so a single instance can serve concurrent
    invocations.
    """

    def __init__(self, tools: ToolRegistry, model_client: ModelClient) -> None:
        self.tools = tools
        self.model_client = model_client

    # ------------------------------------------------------------------ invoke
    def invoke(self, tool_name: str, arguments: Optional[Mapping] = None) -> Dict[str, str]:
        """
        Execute `tool_name` with `arguments`.

        Returns
        -------
        Dict[str, str]
            {"text": str} on success, {"error": str, "code": str} otherwise.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return error_result(INVALID_REQUEST, "Tool arguments must be an object.")

        try:
            spec = self.tools.lookup(tool_name)
        except UnknownToolError as exc:
            logger.error(str(exc))
            return error_result(UNKNOWN_TOOL, str(exc))

        try:
            validated = self._validate(spec, arguments)
        except ArgumentError as exc:
            logger.error("Tool %s rejected: %s", spec.name, exc)
            return error_result(exc.code, str(exc))

        return spec.handle(validated, self.model_client)

    # ---------------------------------------------------------------- validate
    def _validate(self, spec: ToolSpec, arguments: Mapping) -> Dict[str, Any]:
        """Check declared fields in order and fill in defaults for optional ones."""
        validated: Dict[str, Any] = {}
        for field in spec.fields:
            value = arguments.get(field.name)
            if _is_blank(field, value):
                if field.required:
                    raise ArgumentError(
                        MISSING_ARGUMENT,
                        f"Missing required argument '{field.name}' for tool '{spec.name}'.",
                    )
                validated[field.name] = field.default
                continue
            validated[field.name] = _coerce(spec, field, value)

        ignored = sorted(set(arguments) - set(validated))
        if ignored and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tool %s ignoring undeclared arguments: %s", spec.name, ", ".join(ignored))
        return validated


def _is_blank(field: ArgumentField, value: Any) -> bool:
    if value is None:
        return True
    # Whitespace only counts as absent for string fields; elsewhere it is a type error.
    return field.type == STRING and isinstance(value, str) and not value.strip()


def _coerce(spec: ToolSpec, field: ArgumentField, value: Any) -> Any:
    if field.type == STRING and isinstance(value, str):
        return value
    # bool is an int subclass but never a valid float argument.
    if field.type == FLOAT and isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ArgumentError(
        INVALID_ARGUMENT_TYPE,
        f"Argument '{field.name}' for tool '{spec.name}' must be a {field.type}, "
        f"got {type(value).__name__}.",
    )
