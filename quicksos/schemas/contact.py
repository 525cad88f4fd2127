"""Contact schemas."""

from pydantic import BaseModel, Field


class StoredContact(BaseModel):
    """One persisted record of the contact list."""

    id: str
    name: str = ""
    phone: str


class ContactCreate(BaseModel):
    name: str = Field(default="", max_length=200, description="Optional label")
    phone: str = Field(default="", max_length=64, description="Phone number as typed")


class ContactResponse(BaseModel):
    id: str
    name: str
    phone: str
    display_name: str

    model_config = {"from_attributes": True}


class ContactMutationResponse(BaseModel):
    status: str
    contact: ContactResponse | None = None


class RecipientsResponse(BaseModel):
    recipients: str
