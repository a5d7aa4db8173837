"""Schemas shared across resources."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
