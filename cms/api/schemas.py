"""Pydantic models for API requests and responses."""

from typing import Any
from pydantic import BaseModel, Field


class ConfigValueRequest(BaseModel):
    """Request to store a setting value."""
    value: Any = Field(None, description="Any JSON value; null or an empty string clears the setting")
