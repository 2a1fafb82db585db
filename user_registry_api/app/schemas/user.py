"""
Pydantic models for user data.

``UserRead`` is both the stored record and the response shape.  The
store mutates records in place on partial updates, so the model is
left mutable.  Request bodies are not modelled here: the store
validates the raw mapping itself so that it can report which problem
comes first.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., examples=["1"])
    name: str = Field(..., examples=["John"])
    email: str = Field(..., examples=["john@domain.com"])
