"""
Configuration management via environment variables.

This module loads configuration from a .env file using python-dotenv.
All configuration values are accessed through the Settings class.

The Groq API key is the only required value. Everything else has a
default so the relay can start with a single exported variable.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from dalil.core.exceptions import ConfigurationError


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, production)
        log_level: Console logging verbosity
        log_dir: Optional directory for daily log files
        groq_api_key: Bearer token for the Groq completion API
        llm_model: Model identifier sent with every completion request
        host: Listen address
        port: Listen port
        allowed_origins: CORS origins; empty means every origin is allowed
        public_dir: Directory of static assets served at "/"
        max_message_length: Longest accepted (trimmed) user message
        enable_audit_logging: Whether the request audit middleware is installed
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Optional[str]

    # LLM settings
    groq_api_key: str
    llm_model: str

    # Server settings
    host: str
    port: int
    allowed_origins: Tuple[str, ...]
    public_dir: str

    # Safety settings
    max_message_length: int
    enable_audit_logging: bool

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Blank values count as unset, so `GROQ_API_KEY=` in a .env file
    is reported the same way as a missing key.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value, stripped

    Raises:
        ConfigurationError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, "").strip()
    if value:
        return value
    if default is None:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return default


def _parse_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; call `get_settings.cache_clear()`
    after changing the environment (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ConfigurationError: If GROQ_API_KEY is missing or a numeric value is malformed
    """
    try:
        port = int(_get_env("PORT", str(DEFAULT_PORT)))
        max_message_length = int(_get_env("MAX_MESSAGE_LENGTH", "350"))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "DalilAlafiyahRelay"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=os.environ.get("LOG_DIR") or None,

        # LLM
        groq_api_key=_get_env("GROQ_API_KEY"),
        llm_model=_get_env("GROQ_MODEL", DEFAULT_MODEL),

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=port,
        allowed_origins=_parse_origins(os.environ.get("ALLOWED_ORIGINS", "")),
        public_dir=_get_env("PUBLIC_DIR", "public"),

        # Safety
        max_message_length=max_message_length,
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
    )
