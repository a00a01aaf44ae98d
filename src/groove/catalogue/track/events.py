"""Domain events for the Track aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from groove.domain import groove


@groove.event(part_of="Track")
class TrackPublished:
    __version__ = 1

    track_id = Identifier(required=True)
    title = String(required=True)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float()
    published_at = DateTime(required=True)


@groove.event(part_of="Track")
class TrackDetailsUpdated:
    __version__ = 1

    track_id = Identifier(required=True)
    title = String(required=True)
    image_url = String()
    price = Float()


@groove.event(part_of="Track")
class TrackWithdrawn:
    """The track was hidden from browsing."""

    __version__ = 1

    track_id = Identifier(required=True)
