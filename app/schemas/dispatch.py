"""Schemas for the dispatch endpoint."""

from typing import Literal

from pydantic import BaseModel, Field


class DispatchRequest(BaseModel):
    """Request body for /messages/dispatch."""

    user_ids: list[int] = Field(..., description="Target user identifiers", examples=[[66, 1, 5, 6, 10, 99, 32]])
    message: str = Field(..., description="Message body", examples=["This is a message for %user_email%"])


class DeliveryResultSchema(BaseModel):
    """Per-recipient delivery status."""

    id: int
    status: Literal["delivered", "error"]


class DispatchResponse(BaseModel):
    """Response payload for a successful dispatch."""

    results: list[DeliveryResultSchema]
