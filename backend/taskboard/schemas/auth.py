"""Auth Schemas: registration, login and the public user shape.

Invariants:
    - name, email, password required on registration
    - email must look like local@domain.tld; password at least 6 characters
    - UserResponse never carries the password hash
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def _check_email(v: str) -> str:
    v = v.strip()
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Please enter a valid email address")
    return v


class RegisterRequest(BaseModel):
    """Registration: validates presence, email shape and password length."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=256)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return _check_email(v)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return _check_email(v)


class UserResponse(BaseModel):
    """Public user data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    email: str
    name: str
    created_at: str


class AuthResponse(BaseModel):
    user: UserResponse
    token: str
