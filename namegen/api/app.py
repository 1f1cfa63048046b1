"""
FastAPI Application - REST API for name generation.

Endpoints:
    GET    /api/v1/health                      Health check
    GET    /api/v1/grammars                    List grammar names
    POST   /api/v1/grammars                    Load grammar text
    GET    /api/v1/grammars/{name}             Grammar summary
    POST   /api/v1/grammars/{name}/generate    Generate names

All responses are JSON with explicit Pydantic schemas. Engine errors are
returned as ErrorResponse with a machine-readable error_code.
"""

import structlog

from .. import __version__
from ..config import Settings, load_settings
from ..engine_core import NameGenerator
from ..grammar.errors import NamegenError

logger = structlog.get_logger(__name__)

# Cap on each rejection loop when NAMEGEN_MAX_ATTEMPTS is unset.
DEFAULT_MAX_ATTEMPTS = 10_000


def create_app(service=None, settings: Settings | None = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional NamegenService instance (creates new if not provided)
        settings: Optional settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Request
        from fastapi.encoders import jsonable_encoder
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import NamegenService, error_response, error_status
    from .schemas import (
        LoadGrammarsRequest,
        GenerateRequest,
        GrammarListResponse,
        LoadGrammarsResponse,
        GrammarInfo,
        GenerateResponse,
        ErrorCode,
        ErrorResponse,
        HealthResponse,
    )

    settings = settings or load_settings()

    if service is None:
        service = NamegenService(
            generator=NameGenerator(
                seed=settings.seed,
                max_attempts=(
                    settings.max_attempts
                    if settings.max_attempts is not None
                    else DEFAULT_MAX_ATTEMPTS
                ),
            )
        )
        if settings.grammar_files:
            service.load_files(settings.grammar_files)

    app = FastAPI(
        title="Namegen API",
        description="Grammar-driven fictional name generation.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NamegenError)
    async def handle_namegen_error(request: Request, exc: NamegenError) -> JSONResponse:
        status_code = error_status(exc)
        logger.info(
            "request_failed",
            path=request.url.path,
            error_code=exc.code,
            status_code=status_code,
        )
        return JSONResponse(
            status_code=status_code,
            content=error_response(exc).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            error_code=ErrorCode.VALIDATION_ERROR,
            error="Request validation failed",
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return JSONResponse(status_code=422, content=body.model_dump(mode="json"))

    # =========================================================================
    # Grammar Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/grammars",
        response_model=GrammarListResponse,
        tags=["Grammars"],
        summary="List registered grammars",
    )
    def list_grammars() -> GrammarListResponse:
        return service.list_grammars()

    @app.post(
        "/api/v1/grammars",
        response_model=LoadGrammarsResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Grammars"],
        summary="Load grammar definitions",
    )
    def load_grammars(request: LoadGrammarsRequest) -> LoadGrammarsResponse:
        """
        Parse and register grammar text.

        The load is all-or-nothing: if any block is invalid, no grammar
        from this text is registered.
        """
        return service.load_grammars(request)

    @app.get(
        "/api/v1/grammars/{name}",
        response_model=GrammarInfo,
        responses={404: {"model": ErrorResponse}},
        tags=["Grammars"],
        summary="Get a grammar summary",
    )
    def get_grammar(name: str) -> GrammarInfo:
        return service.get_grammar(name)

    # =========================================================================
    # Generation Endpoint
    # =========================================================================

    @app.post(
        "/api/v1/grammars/{name}/generate",
        response_model=GenerateResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Empty rule set or malformed rule"},
            404: {"model": ErrorResponse, "description": "Grammar not found"},
            422: {"model": ErrorResponse, "description": "Retry limit exceeded"},
        },
        tags=["Generation"],
        summary="Generate names from a grammar",
    )
    def generate(name: str, request: GenerateRequest) -> GenerateResponse:
        """
        Generate names.

        Uses the grammar's own rules, or `rule` if given. Pass `seed` for
        reproducible output.
        """
        return service.generate(name, request)

    # =========================================================================
    # System
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="namegen",
            version=__version__,
            grammar_count=len(service.generator.list_grammars()),
        )

    return app
