"""Domain events for the Studio aggregate."""

from protean.fields import DateTime, Identifier, String

from groove.domain import groove


@groove.event(part_of="Studio")
class StudioCreated:
    __version__ = 1

    studio_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    name = String(required=True)
    created_at = DateTime(required=True)


@groove.event(part_of="Studio")
class MembershipRequested:
    """An artist asked to join the studio."""

    __version__ = 1

    studio_id = Identifier(required=True)
    request_id = Identifier(required=True)
    artist_id = Identifier(required=True)


@groove.event(part_of="Studio")
class MembershipRequestAccepted:
    __version__ = 1

    studio_id = Identifier(required=True)
    request_id = Identifier(required=True)
    artist_id = Identifier(required=True)


@groove.event(part_of="Studio")
class MembershipRequestDeclined:
    __version__ = 1

    studio_id = Identifier(required=True)
    request_id = Identifier(required=True)
    artist_id = Identifier(required=True)
