# app/utils/responses.py

from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError


def format_response(success: bool, data=None, message: str = ""):
    return {
        "success": success,
        "data": data,
        "message": message,
    }


def error_detail(exc):
    """Human readable detail for an exception raised while handling a request."""
    if isinstance(exc, StarletteHTTPException):
        return exc.detail
    if isinstance(exc, RequestValidationError):
        # "body.username: String should have at least 1 character"
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
        return "; ".join(parts)
    return str(exc)


def format_error_response(exc, status_code=500):
    return {
        "success": False,
        "error": {
            "type": exc.__class__.__name__,
            "detail": error_detail(exc),
            "status_code": status_code
        }
    }
