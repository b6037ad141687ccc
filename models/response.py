"""Response bodies for the HTTP surface."""

from pydantic import BaseModel

from parsing.errors import ErrorKind


class StripResponse(BaseModel):
    """Response body for the POST /strip endpoint."""

    text: str


class ErrorResponse(BaseModel):
    """Body returned when extraction fails with a known error kind."""

    error: ErrorKind
    detail: str
