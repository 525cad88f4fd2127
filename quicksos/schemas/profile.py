"""User profile schemas."""

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    name: str = Field(default="", max_length=200)


class ProfileResponse(BaseModel):
    name: str
