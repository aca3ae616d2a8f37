"""
Response envelope shared by all endpoints.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """A single human-readable message, used for confirmations and errors."""

    message: str = Field(..., examples=["Category created successfully"])
