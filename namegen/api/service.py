"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to NameGenerator calls
2. Formats engine results as response schemas
3. Maps engine errors to ErrorResponse + HTTP status

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random

from .schemas import (
    LoadGrammarsRequest,
    GenerateRequest,
    GrammarListResponse,
    LoadGrammarsResponse,
    GrammarInfo,
    GenerateResponse,
    ErrorResponse,
    ErrorCode,
)
from ..engine_core import NameGenerator
from ..grammar.errors import (
    NamegenError,
    UnknownGrammar,
    RetryLimitExceeded,
    SourceUnreadable,
)


@dataclass
class NamegenService:
    """
    Main API service.

    Usage:
        service = NamegenService()
        service.load_grammars(LoadGrammarsRequest(source_text=text))
        response = service.generate("Fantasy male", GenerateRequest(count=5))
    """
    generator: NameGenerator = field(default_factory=NameGenerator)

    def load_grammars(self, request: LoadGrammarsRequest) -> LoadGrammarsResponse:
        """Parse and register grammar text. Raises ParseError on invalid text."""
        loaded = self.generator.load_grammars(request.source_text)
        return LoadGrammarsResponse(
            success=True,
            loaded=loaded,
            total=len(self.generator.list_grammars()),
        )

    def load_files(self, sources: list[str]) -> list[str]:
        """Preload grammar files (paths or bundled names)."""
        loaded: list[str] = []
        for source in sources:
            loaded.extend(self.generator.load_file(source))
        return loaded

    def list_grammars(self) -> GrammarListResponse:
        names = sorted(self.generator.list_grammars())
        return GrammarListResponse(grammars=names, count=len(names))

    def get_grammar(self, name: str) -> GrammarInfo:
        grammar = self.generator.get_grammar(name)
        return GrammarInfo(
            name=grammar.name,
            pool_sizes=grammar.pool_sizes(),
            rules=list(grammar.rules),
        )

    def generate(self, name: str, request: GenerateRequest) -> GenerateResponse:
        """
        Generate names.

        A request seed gets its own random source, so the same seed always
        returns the same names regardless of earlier requests.
        """
        rng = random.Random(request.seed) if request.seed is not None else None
        names = self.generator.generate_many(
            name,
            request.count,
            rule=request.rule,
            rng=rng,
        )
        return GenerateResponse(
            grammar=name,
            names=names,
            rule=request.rule,
            seed=request.seed,
        )


def error_status(error: NamegenError) -> int:
    """HTTP status for an engine error."""
    if isinstance(error, UnknownGrammar):
        return 404
    if isinstance(error, RetryLimitExceeded):
        return 422
    if isinstance(error, SourceUnreadable):
        return 500
    return 400


def error_response(error: NamegenError) -> ErrorResponse:
    """ErrorResponse for an engine error."""
    details = {
        key: value
        for key, value in vars(error).items()
        if isinstance(value, (str, int)) and not key.startswith("_")
    }
    try:
        code = ErrorCode(error.code)
    except ValueError:
        code = ErrorCode.INTERNAL_ERROR
    return ErrorResponse(
        error=str(error),
        error_code=code,
        details=details or None,
    )
