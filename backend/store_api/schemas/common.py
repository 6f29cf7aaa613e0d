"""
Schemas shared by every resource.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class RecordRead(BaseModel):
    """
    Store-managed fields present on every stored record.
    """
    id: int = Field(..., description="Surrogate identifier")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
