"""Tool specifications and registry utilities for the MCP server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from pair_programmer.llm_client import ModelClient

logger = logging.getLogger(__name__)

STRING = "string"
FLOAT = "float"

#: Argument type -> JSON Schema type advertised to MCP clients.
JSON_TYPES = {STRING: "string", FLOAT: "number"}


class PromptBuilder(Protocol):
    """Callable signature every prompt template must follow."""

    def __call__(self, args: Dict[str, Any]) -> str:
        ...


@dataclass(frozen=True, slots=True)
class ArgumentField:
    """One declared argument of a tool."""

    name: str
    type: str
    required: bool
    description: str
    default: Any = None

    def __post_init__(self) -> None:
        if self.type not in JSON_TYPES:
            raise ValueError(f"Argument '{self.name}' has unsupported type '{self.type}'.")
        if self.required and self.default is not None:
            raise ValueError(f"Required argument '{self.name}' cannot declare a default.")
        if not self.required and self.default is None:
            raise ValueError(f"Optional argument '{self.name}' must declare a default.")

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": JSON_TYPES[self.type], "description": self.description}
        if not self.required:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """
    Declarative description of one tool.

    `temperature` pins the sampling temperature for the tool. When it is
    None the validated ``temperature`` argument is used instead.
    """

    name: str
    description: str
    fields: Tuple[ArgumentField, ...]
    build_prompt: PromptBuilder
    temperature: Optional[float] = None

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema object describing the tool's arguments."""
        return {
            "type": "object",
            "properties": {field.name: field.json_schema() for field in self.fields},
            "required": [field.name for field in self.fields if field.required],
        }

    def handle(self, args: Dict[str, Any], model_client: ModelClient) -> Dict[str, str]:
        """Build the prompt from validated args and run it through the model client."""
        model = args["model"]
        logger.info("Tool called: %s with model: %s", self.name, model)

        temperature = self.temperature if self.temperature is not None else args["temperature"]
        result = model_client.call(self.build_prompt(args), model, temperature)
        if "error" in result:
            return result

        logger.info("Tool %s completed successfully using model %s", self.name, model)
        return result


class DuplicateToolError(ValueError):
    """Raised when two tools are registered under the same name."""


class UnknownToolError(LookupError):
    """Raised when a tool name is not registered."""

    def __init__(self, name: str, available: List[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown tool '{name}'. Available tools: {', '.join(available)}")


class ToolRegistry:
    """Ordered set of ToolSpecs, filled at startup and only read afterwards."""

    def __init__(self, specs: Iterable[ToolSpec] = ()) -> None:
        self._specs: Dict[str, ToolSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._specs:
            raise DuplicateToolError(f"Tool '{spec.name}' is already registered.")
        self._specs[spec.name] = spec

    def lookup(self, name: str) -> ToolSpec:
        try:
            return self._specs[name]
        except (KeyError, TypeError):
            raise UnknownToolError(name, self.names()) from None

    def list(self) -> List[Dict[str, Any]]:
        """Name, description and input schema of every tool, in registration order."""
        return [
            {
                "name": spec.name,
                "description": spec.description,
                "input_schema": spec.input_schema(),
            }
            for spec in self._specs.values()
        ]

    def names(self) -> List[str]:
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)
