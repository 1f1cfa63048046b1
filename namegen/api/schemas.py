"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- SOURCE_UNREADABLE: Grammar source could not be obtained
- MALFORMED_GRAMMAR_BLOCK: Brace, name or value syntax violation
- UNRECOGNIZED_POOL_KEY: Unknown key in a grammar body
- DUPLICATE_GRAMMAR_NAME: Grammar name already registered
- UNKNOWN_GRAMMAR: Grammar does not exist
- EMPTY_RULE_SET: Grammar has no rules
- EMPTY_OR_MALFORMED_RULE: Rule text is empty or malformed
- RETRY_LIMIT_EXCEEDED: Generation gave up after the configured attempts
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes, one per engine error type."""
    SOURCE_UNREADABLE = "SOURCE_UNREADABLE"
    MALFORMED_GRAMMAR_BLOCK = "MALFORMED_GRAMMAR_BLOCK"
    UNRECOGNIZED_POOL_KEY = "UNRECOGNIZED_POOL_KEY"
    DUPLICATE_GRAMMAR_NAME = "DUPLICATE_GRAMMAR_NAME"
    UNKNOWN_GRAMMAR = "UNKNOWN_GRAMMAR"
    EMPTY_RULE_SET = "EMPTY_RULE_SET"
    EMPTY_OR_MALFORMED_RULE = "EMPTY_OR_MALFORMED_RULE"
    RETRY_LIMIT_EXCEEDED = "RETRY_LIMIT_EXCEEDED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class LoadGrammarsRequest(BaseModel):
    """Request to parse and register grammar text."""
    source_text: str = Field(..., description="Grammar definitions in .cfg format")


class GenerateRequest(BaseModel):
    """Request to generate names from a grammar."""
    count: int = Field(1, ge=1, le=100, description="Number of names to generate")
    rule: Optional[str] = Field(None, description="Custom rule; grammar rules are used if omitted")
    seed: Optional[int] = Field(None, description="Seed for reproducible output")


# =============================================================================
# Response Models
# =============================================================================

class GrammarListResponse(BaseModel):
    """All registered grammar names."""
    grammars: list[str] = Field(default_factory=list)
    count: int = 0


class LoadGrammarsResponse(BaseModel):
    """Result of loading grammar text."""
    success: bool
    loaded: list[str] = Field(default_factory=list, description="Grammars added by this load")
    total: int = Field(0, description="Grammars registered after the load")


class GrammarInfo(BaseModel):
    """Summary of one grammar."""
    name: str
    pool_sizes: dict[str, int] = Field(
        default_factory=dict,
        description="Element count per pool, keyed by grammar file key",
    )
    rules: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class GenerateResponse(BaseModel):
    """Generated names."""
    grammar: str
    names: list[str] = Field(default_factory=list)
    rule: Optional[str] = None
    seed: Optional[int] = None


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    grammar_count: int = 0
