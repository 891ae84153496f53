"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from hotel_api import __version__
from hotel_api.core.config import settings
from hotel_api.core.exceptions import HotelNotFoundError, HotelValidationError, StorageError
from hotel_api.core.logging import setup_logging, request_id_var, new_request_id
from hotel_api.db.init_db import init_db
from hotel_api.db.models import TYPE_MESSAGES
from hotel_api.schemas.hotel import ValidationErrorResponse
from hotel_api.api import hotels


# Setup logging
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    init_db()
    yield


# Create FastAPI app
app = FastAPI(
    title="Hotel Registry API",
    description="Create, list, fetch and delete hotel records",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Tag logs and the response with a request id."""
    request_id = request.headers.get("X-Request-ID") or new_request_id()
    request.state.request_id = request_id
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(HotelValidationError)
async def hotel_validation_error_handler(request: Request, exc: HotelValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(errors=exc.errors).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report unparseable request bodies the same way as field violations."""
    errors = {}
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            field = ".".join(loc) or "body"
        errors.setdefault(field, TYPE_MESSAGES.get(field) or error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(errors=errors).model_dump()
    )


@app.exception_handler(HotelNotFoundError)
async def hotel_not_found_handler(request: Request, exc: HotelNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Hotel not found"}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Generic 500 for anything not handled above.
    
    Runs in Starlette's outermost middleware, after request_id_middleware
    has unwound, so the request id is read back from request.state. Starlette
    re-raises the exception afterwards and the server logs it again.
    """
    request_id = getattr(request.state, "request_id", None) or "-"
    logger.exception("Unhandled error on %s %s [%s]", request.method, request.url.path, request_id)
    response = JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )
    if request_id != "-":
        response.headers["X-Request-ID"] = request_id
    return response


# Include routers
app.include_router(hotels.router, prefix="/api", tags=["hotels"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Hotel Registry API", "version": __version__}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
