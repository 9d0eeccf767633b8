"""API error handling

Maps application errors onto the JSON error envelope:
{"error": {"code": ..., "message": ..., "reason": ...}}
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from src.app.pricing.errors import PricingError

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Error caused by the client request, rendered with a 4xx status"""

    def __init__(self, error: PricingError, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def error_body(code: str, message: str, reason=None) -> dict:
    return {"error": {"code": code, "message": message, "reason": reason}}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error.code, exc.error.message, exc.error.reason),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "VALIDATION_ERROR",
            "Invalid request parameters",
            "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ),
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
