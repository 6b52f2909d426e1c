import logging

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from walletscore.errors import AuthenticationError, UserError, ValidationError

logger = logging.getLogger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    """Create JSON error response with a type for machine parsing."""
    return JSONResponse(status_code=status_code, content={"error": message, "type": error_type})


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, AuthenticationError):
        status_code = 401
    elif isinstance(exc, ValidationError):
        status_code = 400
    else:
        status_code = 400

    error_type = exc.error_type if isinstance(exc, UserError) else "bad_request"
    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
