"""
Pydantic models for User request validation.
"""

from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class ProfileUpdateRequest(BaseModel):
    """Request body for updating the current user's profile."""
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)
    birthday: Optional[str] = Field(None, max_length=30)
