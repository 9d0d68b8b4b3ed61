"""Base controller for JSON API endpoints."""

import logging
from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ApiEnvelope(BaseModel):
    """Uniform body of every API response."""
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable outcome")
    data: Optional[Any] = Field(None, description="Payload, omitted when empty")


class BaseApiController:
    """Wraps controller output in a {status, message, data} JSON envelope."""

    def __init__(self, app=None):
        self.app = app

    def send_response(self, message: str = "ok", status: int = 200, data: Any = None) -> JSONResponse:
        """
        Send a JSON envelope.

        Args:
            message: Outcome message
            status: HTTP status code, also used as the response status
            data: Payload; left out of the envelope when empty
        """
        envelope = ApiEnvelope(status=status, message=message, data=data if data else None)
        return JSONResponse(
            status_code=status,
            content=envelope.model_dump(exclude={"data"} if envelope.data is None else None),
        )

    def send_error(self, message: str, status: int = 500) -> JSONResponse:
        logger.warning(f"API error {status}: {message}")
        return self.send_response(message, status)

    def send_ok(self, message: str, status: int = 200) -> JSONResponse:
        return self.send_response(message, status)

    def missing_method(self, *parameters) -> JSONResponse:
        """Fallback for requests that match no API action."""
        return self.send_error("Invalid Method")
