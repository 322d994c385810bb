"""
Dalil Alafiyah relay package.

This package is organized by responsibility:
- api/       : FastAPI application, routes and HTTP handling
- core/      : Configuration, logging, exceptions and middleware
- services/  : Chat relay orchestration
- llm/       : Groq client and the fixed system prompt
- stats/     : In-memory usage statistics
- models/    : Pydantic request/response schemas
"""

__version__ = "1.0.0"
