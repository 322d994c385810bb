"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Errors rendered as `reply` payloads
"""
from dalil.core.config import get_settings, Settings
from dalil.core.exceptions import ConfigurationError, RelayException
from dalil.core.logging_config import setup_logging, get_logger

__all__ = [
    "get_settings",
    "Settings",
    "ConfigurationError",
    "RelayException",
    "setup_logging",
    "get_logger",
]
