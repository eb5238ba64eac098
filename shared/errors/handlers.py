import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import AppError, InternalError, ValidationError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, err: AppError):
        return JSONResponse(status_code=err.status_code, content={"error": err.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, err: RequestValidationError):
        logger.info("request_rejected", path=request.url.path, errors=len(err.errors()))
        return JSONResponse(status_code=400, content={"error": ValidationError().message})

    # Anything else surfaces in the same {"error": ...} shape instead of a bare 500
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, err: Exception):
        logger.exception("unhandled_error", method=request.method, path=request.url.path)
        return JSONResponse(status_code=500, content={"error": InternalError().message})
