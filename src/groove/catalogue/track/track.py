"""Track aggregate: a single release, free when published by an artist, paid when sold by a studio."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String

from groove.catalogue.track.events import TrackDetailsUpdated, TrackPublished, TrackWithdrawn
from groove.domain import groove


@groove.aggregate
class Track:
    title = String(required=True, max_length=255)
    image_url = String(max_length=1000)
    blob_url = String(required=True, max_length=1000)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float(default=0.0)
    visible = Boolean(default=True)
    published_at = DateTime()

    @invariant.post
    def track_must_have_an_owner(self):
        if not self.artist_id and not self.studio_id:
            raise ValidationError({"track": ["A track must belong to an artist or a studio"]})

    @invariant.post
    def price_cannot_be_negative(self):
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

    @invariant.post
    def only_studios_sell_tracks(self):
        if self.price and self.price > 0 and not self.studio_id:
            raise ValidationError({"price": ["Only studio releases can be sold"]})

    @property
    def is_paid(self):
        return bool(self.price and self.price > 0)

    @classmethod
    def publish(cls, title, blob_url, image_url=None, artist_id=None, studio_id=None, price=0.0):
        now = datetime.now(UTC)
        track = cls(
            title=title,
            blob_url=blob_url,
            image_url=image_url,
            artist_id=artist_id,
            studio_id=studio_id,
            price=price or 0.0,
            visible=True,
            published_at=now,
        )
        track.raise_(
            TrackPublished(
                track_id=track.id,
                title=title,
                artist_id=artist_id,
                studio_id=studio_id,
                price=track.price,
                published_at=now,
            )
        )
        return track

    def update_details(self, title=None, image_url=None, price=None):
        if title is not None:
            self.title = title
        if image_url is not None:
            self.image_url = image_url
        if price is not None:
            self.price = price

        self.raise_(
            TrackDetailsUpdated(
                track_id=self.id,
                title=self.title,
                image_url=self.image_url,
                price=self.price,
            )
        )

    def withdraw(self):
        """Hide the track from the catalogue; purchased copies stay downloadable."""
        if not self.visible:
            raise ValidationError({"visible": ["Track is already withdrawn"]})

        self.visible = False
        self.raise_(TrackWithdrawn(track_id=self.id))
