"""Artist aggregate: the public profile an account publishes music under."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from groove.catalogue.artist.events import (
    ArtistJoinedStudio,
    ArtistLeftStudio,
    ArtistProfileCreated,
    ArtistProfileUpdated,
)
from groove.domain import groove


@groove.aggregate
class Artist:
    account_id = Identifier(required=True, unique=True)
    name = String(required=True, max_length=100)
    description = Text()
    image_url = String(max_length=1000)
    studio_id = Identifier()
    created_at = DateTime()

    @classmethod
    def create(cls, account_id, name, description=None, image_url=None):
        now = datetime.now(UTC)
        artist = cls(
            account_id=account_id,
            name=name,
            description=description,
            image_url=image_url,
            created_at=now,
        )
        artist.raise_(
            ArtistProfileCreated(
                artist_id=artist.id,
                account_id=account_id,
                name=name,
                created_at=now,
            )
        )
        return artist

    def update_profile(self, name=None, description=None, image_url=None):
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url

        self.raise_(
            ArtistProfileUpdated(
                artist_id=self.id,
                name=self.name,
                description=self.description,
                image_url=self.image_url,
            )
        )

    def join_studio(self, studio_id):
        if self.studio_id:
            raise ValidationError({"studio_id": ["Artist already belongs to a studio"]})

        self.studio_id = studio_id
        self.raise_(ArtistJoinedStudio(artist_id=self.id, studio_id=studio_id))

    def leave_studio(self):
        if not self.studio_id:
            raise ValidationError({"studio_id": ["Artist does not belong to a studio"]})

        studio_id = self.studio_id
        self.studio_id = None
        self.raise_(ArtistLeftStudio(artist_id=self.id, studio_id=studio_id))
