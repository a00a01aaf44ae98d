"""FastAPI endpoints for accounts: registration, profile, likes and balance."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from groove.config import get_settings
from groove.identity.account.account import Account
from groove.identity.account.information import UpdateUserInformation
from groove.identity.account.likes import LikeAlbum, LikeTrack, UnlikeAlbum, UnlikeTrack
from groove.identity.account.registration import RegisterAccount
from groove.identity.api.schemas import (
    AccountIdResponse,
    AccountResponse,
    BalanceResponse,
    LikesResponse,
    RegisterAccountRequest,
    StatusResponse,
    UpdateUserInformationRequest,
    UserInformationSchema,
)

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _account_response(account) -> AccountResponse:
    info = account.user_information
    return AccountResponse(
        account_id=str(account.id),
        email=account.email,
        display_name=account.display_name,
        role=account.role,
        balance=account.balance,
        user_information=(
            UserInformationSchema(
                street=info.street,
                city=info.city,
                postal_code=info.postal_code,
                country=info.country,
            )
            if info
            else None
        ),
    )


@router.post("", status_code=201, response_model=AccountIdResponse)
async def register_account(body: RegisterAccountRequest) -> AccountIdResponse:
    command = RegisterAccount(
        email=body.email,
        display_name=body.display_name,
        role=body.role,
    )
    result = current_domain.process(command, asynchronous=False)
    return AccountIdResponse(account_id=result)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(account_id: str) -> AccountResponse:
    account = current_domain.repository_for(Account).get(account_id)
    return _account_response(account)


@router.put("/{account_id}/information", response_model=StatusResponse)
async def update_user_information(account_id: str, body: UpdateUserInformationRequest) -> StatusResponse:
    command = UpdateUserInformation(
        account_id=account_id,
        street=body.street,
        city=body.city,
        postal_code=body.postal_code,
        country=body.country,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.get("/{account_id}/balance", response_model=BalanceResponse)
async def get_balance(account_id: str) -> BalanceResponse:
    account = current_domain.repository_for(Account).get(account_id)
    return BalanceResponse(
        account_id=str(account.id),
        balance=account.balance,
        currency=get_settings().currency,
    )


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------
@router.post("/{account_id}/likes/tracks/{track_id}", response_model=StatusResponse)
async def like_track(account_id: str, track_id: str) -> StatusResponse:
    current_domain.process(LikeTrack(account_id=account_id, track_id=track_id), asynchronous=False)
    return StatusResponse()


@router.delete("/{account_id}/likes/tracks/{track_id}", response_model=StatusResponse)
async def unlike_track(account_id: str, track_id: str) -> StatusResponse:
    current_domain.process(UnlikeTrack(account_id=account_id, track_id=track_id), asynchronous=False)
    return StatusResponse()


@router.get("/{account_id}/likes/tracks", response_model=LikesResponse)
async def liked_tracks(account_id: str) -> LikesResponse:
    account = current_domain.repository_for(Account).get(account_id)
    return LikesResponse(account_id=account_id, ids=[str(like.track_id) for like in account.track_likes])


@router.post("/{account_id}/likes/albums/{album_id}", response_model=StatusResponse)
async def like_album(account_id: str, album_id: str) -> StatusResponse:
    current_domain.process(LikeAlbum(account_id=account_id, album_id=album_id), asynchronous=False)
    return StatusResponse()


@router.delete("/{account_id}/likes/albums/{album_id}", response_model=StatusResponse)
async def unlike_album(account_id: str, album_id: str) -> StatusResponse:
    current_domain.process(UnlikeAlbum(account_id=account_id, album_id=album_id), asynchronous=False)
    return StatusResponse()


@router.get("/{account_id}/likes/albums", response_model=LikesResponse)
async def liked_albums(account_id: str) -> LikesResponse:
    account = current_domain.repository_for(Account).get(account_id)
    return LikesResponse(account_id=account_id, ids=[str(like.album_id) for like in account.album_likes])
