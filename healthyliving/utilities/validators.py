"""
Request body schemas using Pydantic.
"""
from pydantic import BaseModel, Field


class DraftInput(BaseModel):
    """Schema for a draft field change (one keystroke or paste)."""
    value: str = Field(default="", max_length=2000)


class SubmitResult(BaseModel):
    """Schema for the outcome of a submit tap."""
    result: str
    status: str
