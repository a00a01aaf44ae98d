"""Domain events for the Album aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from groove.domain import groove


@groove.event(part_of="Album")
class AlbumPublished:
    __version__ = 1

    album_id = Identifier(required=True)
    title = String(required=True)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float()
    track_count = Integer()
    published_at = DateTime(required=True)


@groove.event(part_of="Album")
class AlbumDetailsUpdated:
    __version__ = 1

    album_id = Identifier(required=True)
    title = String(required=True)
    price = Float()


@groove.event(part_of="Album")
class AlbumTrackAdded:
    __version__ = 1

    album_id = Identifier(required=True)
    album_track_id = Identifier(required=True)
    title = String(required=True)
    position = Integer()


@groove.event(part_of="Album")
class AlbumTrackRemoved:
    __version__ = 1

    album_id = Identifier(required=True)
    album_track_id = Identifier(required=True)


@groove.event(part_of="Album")
class AlbumWithdrawn:
    __version__ = 1

    album_id = Identifier(required=True)
