"""Album aggregate with its tracks.

Album tracks only exist as part of the album: buying the album grants
every track on it, and the tracks are not sold separately.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from groove.catalogue.album.events import (
    AlbumDetailsUpdated,
    AlbumPublished,
    AlbumTrackAdded,
    AlbumTrackRemoved,
    AlbumWithdrawn,
)
from groove.domain import groove


@groove.entity(part_of="Album")
class AlbumTrack:
    title = String(required=True, max_length=255)
    blob_url = String(required=True, max_length=1000)
    position = Integer(min_value=1)


@groove.aggregate
class Album:
    title = String(required=True, max_length=255)
    description = Text()
    image_url = String(max_length=1000)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float(default=0.0)
    visible = Boolean(default=True)
    tracks = HasMany(AlbumTrack)
    published_at = DateTime()

    @invariant.post
    def album_must_have_an_owner(self):
        if not self.artist_id and not self.studio_id:
            raise ValidationError({"album": ["An album must belong to an artist or a studio"]})

    @invariant.post
    def price_cannot_be_negative(self):
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

    @invariant.post
    def only_studios_sell_albums(self):
        if self.price and self.price > 0 and not self.studio_id:
            raise ValidationError({"price": ["Only studio releases can be sold"]})

    @property
    def is_paid(self):
        return bool(self.price and self.price > 0)

    @classmethod
    def publish(cls, title, description=None, image_url=None, artist_id=None, studio_id=None, price=0.0, tracks=None):
        """Publish an album.

        Args:
            tracks: list of dicts with ``title`` and ``blob_url``, in play order.
        """
        now = datetime.now(UTC)
        album = cls(
            title=title,
            description=description,
            image_url=image_url,
            artist_id=artist_id,
            studio_id=studio_id,
            price=price or 0.0,
            visible=True,
            published_at=now,
        )
        for position, track in enumerate(tracks or [], start=1):
            album.add_tracks(AlbumTrack(title=track["title"], blob_url=track["blob_url"], position=position))

        album.raise_(
            AlbumPublished(
                album_id=album.id,
                title=title,
                artist_id=artist_id,
                studio_id=studio_id,
                price=album.price,
                track_count=len(album.tracks),
                published_at=now,
            )
        )
        return album

    def update_details(self, title=None, description=None, image_url=None, price=None):
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if price is not None:
            self.price = price

        self.raise_(
            AlbumDetailsUpdated(
                album_id=self.id,
                title=self.title,
                price=self.price,
            )
        )

    def add_track(self, title, blob_url):
        position = max((t.position or 0 for t in self.tracks), default=0) + 1
        track = AlbumTrack(title=title, blob_url=blob_url, position=position)
        self.add_tracks(track)
        self.raise_(
            AlbumTrackAdded(
                album_id=self.id,
                album_track_id=track.id,
                title=title,
                position=position,
            )
        )
        return track

    def remove_track(self, album_track_id):
        track = next((t for t in self.tracks if str(t.id) == str(album_track_id)), None)
        if track is None:
            raise ValidationError({"album_track_id": ["Track not found on this album"]})

        self.remove_tracks(track)
        self.raise_(AlbumTrackRemoved(album_id=self.id, album_track_id=album_track_id))

    def withdraw(self):
        if not self.visible:
            raise ValidationError({"visible": ["Album is already withdrawn"]})

        self.visible = False
        self.raise_(AlbumWithdrawn(album_id=self.id))

    def ordered_tracks(self):
        return sorted(self.tracks, key=lambda t: t.position or 0)
