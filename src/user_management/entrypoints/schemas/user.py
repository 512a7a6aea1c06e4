from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    id: Optional[int] = Field(default=None, description="Ignored, identifiers are assigned by the server")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")
    details: Optional[str] = Field(default=None, description="Free-text details")


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    details: Optional[str] = None
