"""Trusted contacts API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from quicksos.core.deps import ApiSession, get_api_session, get_contact_store
from quicksos.core.sos_policies import STATUS_CONTACT_REMOVED
from quicksos.schemas.contact import (
    ContactCreate,
    ContactMutationResponse,
    ContactResponse,
    RecipientsResponse,
)
from quicksos.services.contact_store import ContactStore

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=list[ContactResponse])
def list_contacts(store: ContactStore = Depends(get_contact_store)):
    """List contacts in the order they were added."""
    return [ContactResponse.model_validate(c) for c in store.list()]


@router.get("/recipients", response_model=RecipientsResponse)
def get_recipients(store: ContactStore = Depends(get_contact_store)):
    """Comma-joined phones, as used for the sms: recipient list."""
    return RecipientsResponse(recipients=store.recipients_csv())


@router.post("", response_model=ContactMutationResponse, status_code=status.HTTP_201_CREATED)
def add_contact(
    data: ContactCreate,
    store: ContactStore = Depends(get_contact_store),
    session: ApiSession = Depends(get_api_session),
):
    """Add a trusted contact. Emergency numbers and short numbers are refused."""
    result = store.add(data.name, data.phone)
    session.sos.set_status(result.status)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.status)
    return ContactMutationResponse(
        status=result.status,
        contact=ContactResponse.model_validate(result.contact),
    )


@router.delete("/{contact_id}", response_model=ContactMutationResponse)
def remove_contact(
    contact_id: str,
    store: ContactStore = Depends(get_contact_store),
    session: ApiSession = Depends(get_api_session),
):
    """Remove a contact. Unknown ids are not an error."""
    store.remove(contact_id)
    session.sos.set_status(STATUS_CONTACT_REMOVED)
    return ContactMutationResponse(status=STATUS_CONTACT_REMOVED)
