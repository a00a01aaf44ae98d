"""Liking and unliking tracks and albums."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from groove.catalogue.album.album import Album
from groove.catalogue.track.track import Track
from groove.domain import groove
from groove.identity.account.account import Account


@groove.command(part_of="Account")
class LikeTrack:
    account_id = Identifier(required=True)
    track_id = Identifier(required=True)


@groove.command(part_of="Account")
class UnlikeTrack:
    account_id = Identifier(required=True)
    track_id = Identifier(required=True)


@groove.command(part_of="Account")
class LikeAlbum:
    account_id = Identifier(required=True)
    album_id = Identifier(required=True)


@groove.command(part_of="Account")
class UnlikeAlbum:
    account_id = Identifier(required=True)
    album_id = Identifier(required=True)


@groove.command_handler(part_of=Account)
class AccountLikesHandler:
    @handle(LikeTrack)
    def like_track(self, command):
        # Raises ObjectNotFoundError for unknown tracks
        current_domain.repository_for(Track).get(command.track_id)

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.like_track(command.track_id)
        repo.add(account)

    @handle(UnlikeTrack)
    def unlike_track(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.unlike_track(command.track_id)
        repo.add(account)

    @handle(LikeAlbum)
    def like_album(self, command):
        current_domain.repository_for(Album).get(command.album_id)

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.like_album(command.album_id)
        repo.add(account)

    @handle(UnlikeAlbum)
    def unlike_album(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.unlike_album(command.album_id)
        repo.add(account)
