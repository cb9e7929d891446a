"""
MemoNotes Backend — Pydantic Response Schemas
===============================================

What:  Pydantic models defining the JSON shapes returned by the API.
How:   FastAPI serializes responses through these models and publishes them
       in the generated OpenAPI document (/docs, /openapi.json).

Request bodies are not modelled here: notes arrive as form fields (POST
/write) or as a raw text body (PUT /notes/{name}).
"""

from typing import Optional

from pydantic import BaseModel, Field


class NoteItem(BaseModel):
    """
    What:  One note as it appears in GET /notes.
    Built from memonotes.models.note.Note via from_attributes.
    """
    name: str = Field(description="Unique note name")
    text: str = Field(description="Note content")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Acknowledgement returned by the mutating endpoints."""
    message: str = Field(description="Human-readable result")
    name: str = Field(description="Name of the affected note")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note 'groceries' was not found",
            "details": {"resource": "note", "resource_id": "groceries"},
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since the service started")
