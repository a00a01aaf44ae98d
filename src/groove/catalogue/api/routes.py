"""FastAPI endpoints for the catalogue: artists, studios, tracks and albums."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from groove.catalogue.album.album import Album
from groove.catalogue.album.publishing import (
    AddAlbumTrack,
    PublishAlbum,
    RemoveAlbumTrack,
    UpdateAlbumDetails,
    WithdrawAlbum,
)
from groove.catalogue.api.schemas import (
    AlbumIdResponse,
    AlbumResponse,
    AlbumTrackIdResponse,
    AlbumTrackResponse,
    AlbumTrackSchema,
    ArtistIdResponse,
    ArtistResponse,
    CreateArtistRequest,
    CreateStudioRequest,
    MembershipRequestBody,
    MembershipRequestResponse,
    PublishAlbumRequest,
    PublishTrackRequest,
    RequestIdResponse,
    StatusResponse,
    StudioIdResponse,
    StudioResponse,
    TrackIdResponse,
    TrackResponse,
    UpdateArtistRequest,
    UpdateReleaseRequest,
)
from groove.catalogue.artist.artist import Artist
from groove.catalogue.artist.profile import LeaveStudio, UpdateArtistProfile
from groove.catalogue.lookup import browse_albums, browse_tracks, studio_members
from groove.catalogue.onboarding import accept_membership, become_artist, open_studio
from groove.catalogue.studio.management import DeclineMembershipRequest, RequestStudioMembership
from groove.catalogue.studio.studio import Studio
from groove.catalogue.track.publishing import PublishTrack, UpdateTrackDetails, WithdrawTrack
from groove.catalogue.track.track import Track

artist_router = APIRouter(prefix="/artists", tags=["artists"])
studio_router = APIRouter(prefix="/studios", tags=["studios"])
track_router = APIRouter(prefix="/tracks", tags=["tracks"])
album_router = APIRouter(prefix="/albums", tags=["albums"])


def _artist_response(artist) -> ArtistResponse:
    return ArtistResponse(
        artist_id=str(artist.id),
        account_id=str(artist.account_id),
        name=artist.name,
        description=artist.description,
        image_url=artist.image_url,
        studio_id=str(artist.studio_id) if artist.studio_id else None,
    )


def _track_response(track) -> TrackResponse:
    return TrackResponse(
        track_id=str(track.id),
        title=track.title,
        image_url=track.image_url,
        artist_id=str(track.artist_id) if track.artist_id else None,
        studio_id=str(track.studio_id) if track.studio_id else None,
        price=track.price,
        is_paid=track.is_paid,
        visible=track.visible,
    )


def _album_response(album) -> AlbumResponse:
    return AlbumResponse(
        album_id=str(album.id),
        title=album.title,
        description=album.description,
        image_url=album.image_url,
        artist_id=str(album.artist_id) if album.artist_id else None,
        studio_id=str(album.studio_id) if album.studio_id else None,
        price=album.price,
        is_paid=album.is_paid,
        visible=album.visible,
        tracks=[
            AlbumTrackResponse(album_track_id=str(t.id), title=t.title, position=t.position)
            for t in album.ordered_tracks()
        ],
    )


# --- Artist endpoints ---


@artist_router.post("", status_code=201, response_model=ArtistIdResponse)
async def create_artist(body: CreateArtistRequest) -> ArtistIdResponse:
    artist_id = become_artist(
        account_id=body.account_id,
        name=body.name,
        description=body.description,
        image_url=body.image_url,
    )
    return ArtistIdResponse(artist_id=artist_id)


@artist_router.get("/{artist_id}", response_model=ArtistResponse)
async def get_artist(artist_id: str) -> ArtistResponse:
    return _artist_response(current_domain.repository_for(Artist).get(artist_id))


@artist_router.put("/{artist_id}", response_model=StatusResponse)
async def update_artist(artist_id: str, body: UpdateArtistRequest) -> StatusResponse:
    command = UpdateArtistProfile(
        artist_id=artist_id,
        name=body.name,
        description=body.description,
        image_url=body.image_url,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@artist_router.post("/{artist_id}/leave-studio", response_model=StatusResponse)
async def leave_studio(artist_id: str) -> StatusResponse:
    current_domain.process(LeaveStudio(artist_id=artist_id), asynchronous=False)
    return StatusResponse()


# --- Studio endpoints ---


@studio_router.post("", status_code=201, response_model=StudioIdResponse)
async def create_studio(body: CreateStudioRequest) -> StudioIdResponse:
    studio_id = open_studio(
        owner_id=body.owner_id,
        name=body.name,
        localization=body.localization,
        image_url=body.image_url,
        address_url=body.address_url,
    )
    return StudioIdResponse(studio_id=studio_id)


@studio_router.get("/{studio_id}", response_model=StudioResponse)
async def get_studio(studio_id: str) -> StudioResponse:
    studio = current_domain.repository_for(Studio).get(studio_id)
    return StudioResponse(
        studio_id=str(studio.id),
        owner_id=str(studio.owner_id),
        name=studio.name,
        localization=studio.localization,
        image_url=studio.image_url,
        address_url=studio.address_url,
        pending_requests=[
            MembershipRequestResponse(request_id=str(r.id), artist_id=str(r.artist_id))
            for r in studio.membership_requests
        ],
    )


@studio_router.get("/{studio_id}/members", response_model=list[ArtistResponse])
async def get_studio_members(studio_id: str) -> list[ArtistResponse]:
    current_domain.repository_for(Studio).get(studio_id)
    return [_artist_response(artist) for artist in studio_members(studio_id)]


@studio_router.post("/{studio_id}/requests", status_code=201, response_model=RequestIdResponse)
async def request_membership(studio_id: str, body: MembershipRequestBody) -> RequestIdResponse:
    command = RequestStudioMembership(studio_id=studio_id, artist_id=body.artist_id)
    request_id = current_domain.process(command, asynchronous=False)
    return RequestIdResponse(request_id=request_id)


@studio_router.post("/{studio_id}/requests/{request_id}/accept", response_model=ArtistIdResponse)
async def accept_membership_request(studio_id: str, request_id: str) -> ArtistIdResponse:
    artist_id = accept_membership(studio_id=studio_id, request_id=request_id)
    return ArtistIdResponse(artist_id=artist_id)


@studio_router.post("/{studio_id}/requests/{request_id}/decline", response_model=StatusResponse)
async def decline_membership_request(studio_id: str, request_id: str) -> StatusResponse:
    command = DeclineMembershipRequest(studio_id=studio_id, request_id=request_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Track endpoints ---


@track_router.post("", status_code=201, response_model=TrackIdResponse)
async def publish_track(body: PublishTrackRequest) -> TrackIdResponse:
    command = PublishTrack(
        title=body.title,
        blob_url=body.blob_url,
        image_url=body.image_url,
        artist_id=body.artist_id,
        studio_id=body.studio_id,
        price=body.price,
    )
    track_id = current_domain.process(command, asynchronous=False)
    return TrackIdResponse(track_id=track_id)


@track_router.get("", response_model=list[TrackResponse])
async def list_tracks(
    artist_id: str | None = None,
    studio_id: str | None = None,
    paid: bool | None = None,
) -> list[TrackResponse]:
    return [_track_response(t) for t in browse_tracks(artist_id=artist_id, studio_id=studio_id, paid=paid)]


@track_router.get("/{track_id}", response_model=TrackResponse)
async def get_track(track_id: str) -> TrackResponse:
    return _track_response(current_domain.repository_for(Track).get(track_id))


@track_router.put("/{track_id}", response_model=StatusResponse)
async def update_track(track_id: str, body: UpdateReleaseRequest) -> StatusResponse:
    command = UpdateTrackDetails(
        track_id=track_id,
        title=body.title,
        image_url=body.image_url,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@track_router.post("/{track_id}/withdraw", response_model=StatusResponse)
async def withdraw_track(track_id: str) -> StatusResponse:
    current_domain.process(WithdrawTrack(track_id=track_id), asynchronous=False)
    return StatusResponse()


# --- Album endpoints ---


@album_router.post("", status_code=201, response_model=AlbumIdResponse)
async def publish_album(body: PublishAlbumRequest) -> AlbumIdResponse:
    command = PublishAlbum(
        title=body.title,
        description=body.description,
        image_url=body.image_url,
        artist_id=body.artist_id,
        studio_id=body.studio_id,
        price=body.price,
        tracks=json.dumps([track.model_dump() for track in body.tracks]),
    )
    album_id = current_domain.process(command, asynchronous=False)
    return AlbumIdResponse(album_id=album_id)


@album_router.get("", response_model=list[AlbumResponse])
async def list_albums(
    artist_id: str | None = None,
    studio_id: str | None = None,
    paid: bool | None = None,
) -> list[AlbumResponse]:
    return [_album_response(a) for a in browse_albums(artist_id=artist_id, studio_id=studio_id, paid=paid)]


@album_router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(album_id: str) -> AlbumResponse:
    return _album_response(current_domain.repository_for(Album).get(album_id))


@album_router.put("/{album_id}", response_model=StatusResponse)
async def update_album(album_id: str, body: UpdateReleaseRequest) -> StatusResponse:
    command = UpdateAlbumDetails(
        album_id=album_id,
        title=body.title,
        description=body.description,
        image_url=body.image_url,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@album_router.post("/{album_id}/tracks", status_code=201, response_model=AlbumTrackIdResponse)
async def add_album_track(album_id: str, body: AlbumTrackSchema) -> AlbumTrackIdResponse:
    command = AddAlbumTrack(album_id=album_id, title=body.title, blob_url=body.blob_url)
    album_track_id = current_domain.process(command, asynchronous=False)
    return AlbumTrackIdResponse(album_track_id=album_track_id)


@album_router.delete("/{album_id}/tracks/{album_track_id}", response_model=StatusResponse)
async def remove_album_track(album_id: str, album_track_id: str) -> StatusResponse:
    command = RemoveAlbumTrack(album_id=album_id, album_track_id=album_track_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@album_router.post("/{album_id}/withdraw", response_model=StatusResponse)
async def withdraw_album(album_id: str) -> StatusResponse:
    current_domain.process(WithdrawAlbum(album_id=album_id), asynchronous=False)
    return StatusResponse()
