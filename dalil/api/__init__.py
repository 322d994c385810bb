"""
API module - FastAPI application and HTTP handling.
"""
from dalil.api.main import create_app, run

__all__ = ["create_app", "run"]
