"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from bencana_api.core.validation import required


class RegisterRequest(BaseModel):
    name: str = Field(None, validate_default=True)
    email: str = Field(None, validate_default=True)
    password: str = Field(None, validate_default=True)

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def fields_required(cls, v, info: ValidationInfo):
        return required(v, f"{info.field_name} is required")


class LoginRequest(BaseModel):
    email: str = Field(None, validate_default=True)
    password: str = Field(None, validate_default=True)

    @field_validator("email", "password", mode="before")
    @classmethod
    def fields_required(cls, v, info: ValidationInfo):
        return required(v, f"{info.field_name} is required")


class TokenIdentity(BaseModel):
    """What a bearer token proves: who logged in."""
    user_id: int
    email: str


class LoginResponse(BaseModel):
    message: str
    token: str


class ProtectedResponse(BaseModel):
    message: str
    user: TokenIdentity
