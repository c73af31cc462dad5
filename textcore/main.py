import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from .clients.logging import get_logger
from .config.config_loader import get_runtime_config
from .services.batch import normalize_phones, parse_names
from .utils.errors import InputTooLargeError, TextCoreError

logger = get_logger(__name__)

config = get_runtime_config()

app = FastAPI(title="textcore")

# For wildcard, we can't use credentials, so disable credentials
allowed_origins = config.api.allowed_origins
use_credentials = "*" not in allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=use_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add request ID to responses for tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)


class TextPayload(BaseModel):
    text: str


class NameParseResponse(BaseModel):
    first_names: str
    last_names: str


class PhoneNormalizeResponse(BaseModel):
    output: str


def _check_size(text: str) -> None:
    limit = config.api.max_body_chars
    if len(text) > limit:
        raise InputTooLargeError(len(text), limit)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors for debugging."""
    logger.error(
        "Request validation error",
        extra={
            "url": str(request.url),
            "method": request.method,
            "errors": exc.errors(),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors()},
    )


@app.exception_handler(InputTooLargeError)
async def input_too_large_handler(request: Request, exc: InputTooLargeError):
    logger.warning(
        "Rejected oversized input",
        extra={"url": str(request.url), "size": exc.size, "limit": exc.limit},
    )
    return JSONResponse(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        content={"detail": str(exc)},
    )


@app.exception_handler(TextCoreError)
async def textcore_error_handler(request: Request, exc: TextCoreError):
    logger.error("Request failed", extra={"url": str(request.url), "error": str(exc)}, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "transient": exc.transient},
    )


@app.get("/health")
def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "config_version": config.config_version,
    }


@app.post("/names/parse", response_model=NameParseResponse)
def parse_names_endpoint(payload: TextPayload):
    """Strip name prefixes and split each line into first and last name."""
    _check_size(payload.text)
    result = parse_names(payload.text, max_lines=config.processing.max_lines)
    return NameParseResponse(first_names=result.first_names, last_names=result.last_names)


@app.post("/phones/normalize", response_model=PhoneNormalizeResponse)
def normalize_phones_endpoint(payload: TextPayload):
    """Normalize each line into a 10-digit local phone number."""
    _check_size(payload.text)
    return PhoneNormalizeResponse(output=normalize_phones(payload.text, max_lines=config.processing.max_lines))
