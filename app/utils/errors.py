# app/utils/errors.py

from fastapi import HTTPException

class BadRequestError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)

class NotFoundError(HTTPException):
    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(status_code=404, detail=f"{resource} '{key}' not found.")

class ServiceUnavailableError(HTTPException):
    """The message store cannot be reached; clients may retry."""

    def __init__(self, detail: str = "Message store is unavailable, try again later."):
        super().__init__(status_code=503, detail=detail, headers={"Retry-After": "5"})
