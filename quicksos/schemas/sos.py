"""SOS send / copy schemas."""

from pydantic import BaseModel, Field


class SosSendRequest(BaseModel):
    """Position measured by the client, if any."""

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    error: str | None = Field(
        default=None,
        pattern="^(unsupported|denied|timeout|unavailable)$",
        description="Why the client could not get a position",
    )


class SosSendResponse(BaseModel):
    status: str
    state: str
    message: str
    map_link: str
    dispatch_uri: str


class SosCopyResponse(BaseModel):
    status: str
    text: str


class SosLastResponse(BaseModel):
    status: str
    message: str = ""
    map_link: str = ""
    dispatch_uri: str = ""
