"""
StaffDesk Backend — Shared Response Schemas
=============================================

What:  Envelope models used by several routers plus the error and health shapes.

Envelope convention:
    Mutations answer with {"Status": true, "message": "..."}; the capitalised
    key is what the admin frontend already reads. Failures carry
    "Status": false and either a human-readable "message" (4xx) or the fixed
    "Error" marker (5xx).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    """Success envelope for mutations and logout."""
    model_config = ConfigDict(populate_by_name=True)

    status: bool = Field(default=True, alias="Status")
    message: str


class MessageResponse(BaseModel):
    """Bare message body returned by POST /add_employee."""
    message: str


class ErrorResponse(BaseModel):
    """
    Error body produced by the global exception handlers.

    Exactly one of `message` (client errors) and `Error` (server errors) is set.
    """
    model_config = ConfigDict(populate_by_name=True)

    status: bool = Field(default=False, alias="Status")
    message: Optional[str] = Field(default=None, description="Human-readable client error")
    error: Optional[str] = Field(default=None, alias="Error", description="Fixed server error marker")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
