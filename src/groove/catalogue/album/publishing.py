"""Album publishing and maintenance: commands and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from groove.catalogue.album.album import Album
from groove.catalogue.ownership import verify_release_owner
from groove.domain import groove


@groove.command(part_of="Album")
class PublishAlbum:
    title = String(required=True, max_length=255)
    description = Text()
    image_url = String(max_length=1000)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float(default=0.0, min_value=0.0)
    tracks = Text()  # JSON: list of {title, blob_url}


@groove.command(part_of="Album")
class UpdateAlbumDetails:
    album_id = Identifier(required=True)
    title = String(max_length=255)
    description = Text()
    image_url = String(max_length=1000)
    price = Float(min_value=0.0)


@groove.command(part_of="Album")
class AddAlbumTrack:
    album_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    blob_url = String(required=True, max_length=1000)


@groove.command(part_of="Album")
class RemoveAlbumTrack:
    album_id = Identifier(required=True)
    album_track_id = Identifier(required=True)


@groove.command(part_of="Album")
class WithdrawAlbum:
    album_id = Identifier(required=True)


@groove.command_handler(part_of=Album)
class AlbumPublishingHandler:
    @handle(PublishAlbum)
    def publish_album(self, command):
        verify_release_owner(artist_id=command.artist_id, studio_id=command.studio_id)

        tracks = json.loads(command.tracks) if command.tracks else []
        album = Album.publish(
            title=command.title,
            description=command.description,
            image_url=command.image_url,
            artist_id=command.artist_id,
            studio_id=command.studio_id,
            price=command.price,
            tracks=tracks,
        )
        current_domain.repository_for(Album).add(album)
        return str(album.id)

    @handle(UpdateAlbumDetails)
    def update_album_details(self, command):
        repo = current_domain.repository_for(Album)
        album = repo.get(command.album_id)
        album.update_details(
            title=command.title,
            description=command.description,
            image_url=command.image_url,
            price=command.price,
        )
        repo.add(album)

    @handle(AddAlbumTrack)
    def add_album_track(self, command):
        repo = current_domain.repository_for(Album)
        album = repo.get(command.album_id)
        track = album.add_track(title=command.title, blob_url=command.blob_url)
        repo.add(album)
        return str(track.id)

    @handle(RemoveAlbumTrack)
    def remove_album_track(self, command):
        repo = current_domain.repository_for(Album)
        album = repo.get(command.album_id)
        album.remove_track(command.album_track_id)
        repo.add(album)

    @handle(WithdrawAlbum)
    def withdraw_album(self, command):
        repo = current_domain.repository_for(Album)
        album = repo.get(command.album_id)
        album.withdraw()
        repo.add(album)
