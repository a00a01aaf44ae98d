"""Domain events for the Artist aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from groove.domain import groove


@groove.event(part_of="Artist")
class ArtistProfileCreated:
    __version__ = 1

    artist_id = Identifier(required=True)
    account_id = Identifier(required=True)
    name = String(required=True)
    created_at = DateTime(required=True)


@groove.event(part_of="Artist")
class ArtistProfileUpdated:
    __version__ = 1

    artist_id = Identifier(required=True)
    name = String(required=True)
    description = Text()
    image_url = String()


@groove.event(part_of="Artist")
class ArtistJoinedStudio:
    """The artist's membership request was accepted by a studio."""

    __version__ = 1

    artist_id = Identifier(required=True)
    studio_id = Identifier(required=True)


@groove.event(part_of="Artist")
class ArtistLeftStudio:
    __version__ = 1

    artist_id = Identifier(required=True)
    studio_id = Identifier(required=True)
