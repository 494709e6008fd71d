"""
Process entry-point for the AI Pair Programmer MCP server.

Responsibilities
- Configure the server and provider log files
- Refuse to start without an OpenRouter API key
- Assemble the model registry, tool registry and dispatcher once
- Serve MCP requests over stdio until the client goes away
"""
from __future__ import annotations

import asyncio
import logging
import sys

from pair_programmer import config
from pair_programmer.dispatcher import Dispatcher
from pair_programmer.llm_client import ModelClient
from pair_programmer.logging_setup import configure_logging
from pair_programmer.models import DEFAULT_REGISTRY, ModelRegistry
from pair_programmer.server import serve
from pair_programmer.tools.catalog import build_tool_registry

logger = logging.getLogger(__name__)


def build_dispatcher(api_key: str, models: ModelRegistry = DEFAULT_REGISTRY) -> Dispatcher:
    """Wire the read-only registries and the model client together."""
    model_client = ModelClient(models, api_key)
    return Dispatcher(build_tool_registry(models), model_client)


def _load_api_key() -> str:
    try:
        api_key = config.get_openrouter_api_key()
    except config.ConfigurationError as exc:
        logger.error(
            "API key not found in environment variable: %s (%s)",
            config.OPENROUTER_API_KEY_ENV,
            exc,
        )
        sys.exit(1)
    logger.info("API key loaded from environment variable: %s", config.OPENROUTER_API_KEY_ENV)
    return api_key


def main() -> None:
    """Run the MCP server."""
    configure_logging(config.LOG_DIR, debug=config.debug_enabled())

    api_key = _load_api_key()
    dispatcher = build_dispatcher(api_key)
    logger.info("AI Pair Programmer MCP Server initialized")

    try:
        logger.info("Starting AI Pair Programmer MCP Server...")
        logger.info("Available models: %s", ", ".join(DEFAULT_REGISTRY.names()))
        logger.info("Default model: %s", DEFAULT_REGISTRY.default)
        asyncio.run(serve(dispatcher))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as exc:
        logger.exception("Fatal error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
