"""
API Module - HTTP interface to the name generator.

Clients:
1. Load grammar definitions (or rely on preloaded grammar files)
2. List and inspect grammars
3. Generate names, optionally with a custom rule or a seed
"""

from .schemas import (
    # Requests
    LoadGrammarsRequest,
    GenerateRequest,
    # Responses
    GrammarListResponse,
    LoadGrammarsResponse,
    GrammarInfo,
    GenerateResponse,
    ErrorResponse,
    HealthResponse,
    ErrorCode,
)
from .service import NamegenService, error_response, error_status
from .app import create_app

__all__ = [
    # Requests
    "LoadGrammarsRequest",
    "GenerateRequest",
    # Responses
    "GrammarListResponse",
    "LoadGrammarsResponse",
    "GrammarInfo",
    "GenerateResponse",
    "ErrorResponse",
    "HealthResponse",
    "ErrorCode",
    # Service
    "NamegenService",
    "error_response",
    "error_status",
    "create_app",
]
