"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from this_weekend.api import weekend_plan
from this_weekend.core.config import get_settings
from this_weekend.core.errors import InputInvalidError, ResponseMalformedError, UpstreamUnavailableError
from this_weekend.core.logger import get_logger
from this_weekend.core.logging_config import configure_logging

configure_logging()
logger = get_logger(__name__)
settings = get_settings()

AI_BACKEND_ERROR_MESSAGE = "AI backend error"
AI_PARSE_ERROR_MESSAGE = "Failed to parse AI response"


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve_docs_mode(mode: str) -> str:
    normalized = (mode or "").strip().lower()
    if normalized in {"disabled", "public"}:
        return normalized
    logger.warning("Invalid DOCS_MODE value, falling back to disabled: %s", mode)
    return "disabled"


def _configure_proxy_headers(app_: FastAPI) -> None:
    if not settings.PROXY_HEADERS_ENABLED:
        return

    trusted_hosts = _split_csv(settings.PROXY_TRUSTED_HOSTS) or ["127.0.0.1"]
    app_.add_middleware(ProxyHeadersMiddleware, trusted_hosts=trusted_hosts)


def _configure_trusted_hosts(app_: FastAPI) -> None:
    trusted_hosts = _split_csv(settings.TRUSTED_HOSTS)
    if not trusted_hosts:
        return

    app_.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)


def _configure_cors(app_: FastAPI) -> None:
    origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_methods = _split_csv(settings.CORS_ALLOW_METHODS) or ["GET", "POST"]
    allow_headers = _split_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type"]
    allow_credentials = settings.CORS_ALLOW_CREDENTIALS

    if "*" in origins and allow_credentials:
        logger.warning(
            "CORS_ALLOW_ORIGINS contains '*' together with CORS_ALLOW_CREDENTIALS=true; "
            "forcing allow_credentials to false."
        )
        allow_credentials = False

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=allow_methods,
        allow_headers=allow_headers,
    )


docs_mode = _resolve_docs_mode(settings.DOCS_MODE)

app = FastAPI(
    title="This Weekend",
    docs_url="/docs" if docs_mode == "public" else None,
    redoc_url="/redoc" if docs_mode == "public" else None,
    openapi_url="/openapi.json" if docs_mode == "public" else None,
)

_configure_proxy_headers(app)
_configure_trusted_hosts(app)
_configure_cors(app)

app.include_router(weekend_plan.router)


@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Attach baseline security headers to every response."""
    response = await call_next(request)
    if not settings.SECURITY_HEADERS_ENABLED:
        return response

    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
    response.headers.setdefault("Cache-Control", "no-store")
    if settings.ENABLE_HSTS and request.url.scheme == "https":
        response.headers.setdefault("Strict-Transport-Security", f"max-age={settings.HSTS_MAX_AGE_SECONDS}")
    return response


@app.exception_handler(InputInvalidError)
async def input_invalid_handler(request: Request, exc: InputInvalidError) -> JSONResponse:
    """Report an unusable request body as 400."""
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(UpstreamUnavailableError)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
    """Report a failed generator call as 500."""
    logger.error("AI backend error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": AI_BACKEND_ERROR_MESSAGE})


@app.exception_handler(ResponseMalformedError)
async def response_malformed_handler(request: Request, exc: ResponseMalformedError) -> JSONResponse:
    """Report an undecodable or invalid generator reply as 500."""
    logger.error("Failed to parse AI response on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": AI_PARSE_ERROR_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a uniform body."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    message = str(exc) if settings.EXPOSE_INTERNAL_ERRORS else "Internal server error."
    return JSONResponse(status_code=500, content={"detail": message})


@app.get("/")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "message": "This Weekend server is running"}
