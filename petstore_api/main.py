"""
Pet Store API - FastAPI Main

Pet-store style CRUD endpoints backed by the Petfinder API.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import JSONResponse

from .auth import TokenProvider
from .client import PetfinderClient
from .config import Settings, get_settings
from .dependencies import PetIdSequence
from .errors import SERVICE_NAME, APIError, ErrorCode, PetstoreError
from .logging_config import setup_logging
from .router import router

logger = logging.getLogger(__name__)

DOCS_PATH = "/api-docs"


async def petstore_error_handler(request: Request, exc: PetstoreError) -> JSONResponse:
    """Render service errors as a structured JSON body."""
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(level, f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code.value}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def response_validation_handler(request: Request, exc: ResponseValidationError) -> JSONResponse:
    """Render a response that failed its schema as an internal error."""
    logger.error(f"{request.method} {request.url.path} -> 500 response failed validation: {exc.errors()}")
    error = APIError(
        error_code=ErrorCode.INTERNAL_ERROR.value,
        message="Response did not match the expected schema",
        details={"errors": len(exc.errors())},
    )
    return JSONResponse(status_code=500, content=error.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort JSON body for anything the route boundary did not expect."""
    logger.exception(f"{request.method} {request.url.path} -> 500 unhandled {type(exc).__name__}: {exc}")
    error = APIError(error_code=ErrorCode.INTERNAL_ERROR.value, message="Internal server error")
    return JSONResponse(status_code=500, content=error.model_dump())


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Service settings (defaults to environment)
        transport: Optional httpx transport for the upstream HTTP client
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info("Starting Pet Store API...")
        if not settings.is_configured:
            logger.warning("Petfinder credentials not configured; upstream-backed routes will fail")

        http = httpx.AsyncClient(timeout=settings.timeout_seconds, transport=transport)
        tokens = TokenProvider(settings, http)
        app.state.tokens = tokens
        app.state.petfinder = PetfinderClient(settings, tokens, http)
        app.state.pet_ids = PetIdSequence()
        try:
            yield
        finally:
            await http.aclose()
            logger.info("Pet Store API stopped.")

    app = FastAPI(
        title="Pet Store API",
        description="A simple pet store API",
        version="1.0.0",
        servers=[{"url": f"http://localhost:{settings.port}", "description": "Development server"}],
        docs_url=DOCS_PATH,
        redoc_url=None,
        openapi_url=f"{DOCS_PATH}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(PetstoreError, petstore_error_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(router)

    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        """Health check."""
        tokens: TokenProvider = request.app.state.tokens
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "token_status": tokens.token_status,
            "token_exchanges": tokens.exchange_count,
        }

    return app


app = create_app()


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.json_logs)

    logger.info(f"Server running on http://localhost:{settings.port}")
    logger.info(f"Swagger docs available at http://localhost:{settings.port}{DOCS_PATH}")

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
