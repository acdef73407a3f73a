# storefront/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# Public projection of a user: never carries the password hash
class UserPublic(BaseModel):
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    user: UserPublic


class AuthStatus(BaseModel):
    is_authenticated: bool = Field(alias="isAuthenticated")

    model_config = ConfigDict(populate_by_name=True)


class UserCounters(BaseModel):
    cart_items_count: int
    wishlist_items_count: int
