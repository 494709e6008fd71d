"""
Central configuration for the AI Pair Programmer MCP server.
Loads environment variables from a .env file at import time.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# --- Load .env early so everything importing config sees the vars ---
# This looks for a .env in the current working dir or parents.
load_dotenv()

#: Environment variable names
OPENROUTER_API_KEY_ENV = "OPENROUTER_API_KEY"
DEBUG_ENV = "DEBUG"

#: OpenAI-compatible endpoint every model call goes through.
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

#: Identity announced to MCP clients during the handshake.
SERVER_NAME = "ai-pair-programmer"
SERVER_VERSION = "1.0.0"

#: Per-user directory holding server.log and provider.log.
LOG_DIR = Path.home() / ".claude-mcp-servers" / "ai-pair-programmer-mcp"


class ConfigurationError(RuntimeError):
    """
    Raised when the process cannot start because a setting is missing.

    A RuntimeError subclass so main() can tell a fatal startup problem
    (exit status 1, nothing served) apart from errors raised while serving.
    """


def require_env(var_name: str) -> str:
    """
    Return the value of an environment variable or raise a clear error.

    Raises
    ------
    ConfigurationError
        If the environment variable is missing or empty.
    """
    try:
        value = os.environ[var_name]
    except KeyError as exc:
        raise ConfigurationError(f"Required environment variable '{var_name}' is not set.") from exc
    if not value.strip():
        raise ConfigurationError(f"Environment variable '{var_name}' is empty.")
    return value


def get_openrouter_api_key() -> str:
    """
    Convenience accessor specifically for the OpenRouter API key.
    """
    return require_env(OPENROUTER_API_KEY_ENV)


def debug_enabled() -> bool:
    """True when DEBUG=1, which switches both log streams to debug verbosity."""
    return os.environ.get(DEBUG_ENV) == "1"
