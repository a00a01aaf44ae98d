"""Pydantic request/response schemas for the Catalogue API.

These are external contracts, kept separate from the Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Artist & Studio Request Schemas
# ---------------------------------------------------------------------------
class CreateArtistRequest(BaseModel):
    account_id: str
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = None


class UpdateArtistRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    image_url: str | None = None


class CreateStudioRequest(BaseModel):
    owner_id: str
    name: str = Field(min_length=1, max_length=100)
    localization: str | None = None
    image_url: str | None = None
    address_url: str | None = None


class MembershipRequestBody(BaseModel):
    artist_id: str


# ---------------------------------------------------------------------------
# Release Request Schemas
# ---------------------------------------------------------------------------
class PublishTrackRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    blob_url: str
    image_url: str | None = None
    artist_id: str | None = None
    studio_id: str | None = None
    price: float = Field(ge=0, default=0.0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Night Drive",
                    "blob_url": "https://blobs.example.com/tracks/night-drive.mp3",
                    "image_url": "https://blobs.example.com/covers/night-drive.png",
                    "studio_id": "studio-001",
                    "price": 4.99,
                }
            ]
        }
    }


class UpdateReleaseRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    price: float | None = Field(ge=0, default=None)


class AlbumTrackSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    blob_url: str


class PublishAlbumRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = None
    artist_id: str | None = None
    studio_id: str | None = None
    price: float = Field(ge=0, default=0.0)
    tracks: list[AlbumTrackSchema] = []


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ArtistIdResponse(BaseModel):
    artist_id: str


class StudioIdResponse(BaseModel):
    studio_id: str


class RequestIdResponse(BaseModel):
    request_id: str


class TrackIdResponse(BaseModel):
    track_id: str


class AlbumIdResponse(BaseModel):
    album_id: str


class AlbumTrackIdResponse(BaseModel):
    album_track_id: str


class ArtistResponse(BaseModel):
    artist_id: str
    account_id: str
    name: str
    description: str | None = None
    image_url: str | None = None
    studio_id: str | None = None


class MembershipRequestResponse(BaseModel):
    request_id: str
    artist_id: str


class StudioResponse(BaseModel):
    studio_id: str
    owner_id: str
    name: str
    localization: str | None = None
    image_url: str | None = None
    address_url: str | None = None
    pending_requests: list[MembershipRequestResponse] = []


class TrackResponse(BaseModel):
    track_id: str
    title: str
    image_url: str | None = None
    artist_id: str | None = None
    studio_id: str | None = None
    price: float
    is_paid: bool
    visible: bool


class AlbumTrackResponse(BaseModel):
    album_track_id: str
    title: str
    position: int | None = None


class AlbumResponse(BaseModel):
    album_id: str
    title: str
    description: str | None = None
    image_url: str | None = None
    artist_id: str | None = None
    studio_id: str | None = None
    price: float
    is_paid: bool
    visible: bool
    tracks: list[AlbumTrackResponse] = []
