"""Studio aggregate with pending artist membership requests.

A studio is owned by one account. Artists ask to join; the studio accepts
or declines each request. Accepted artists reference the studio from their
own aggregate, so the studio only tracks requests that are still pending.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, String

from groove.catalogue.studio.events import (
    MembershipRequestAccepted,
    MembershipRequestDeclined,
    MembershipRequested,
    StudioCreated,
)
from groove.domain import groove


@groove.entity(part_of="Studio")
class MembershipRequest:
    artist_id = Identifier(required=True)
    requested_at = DateTime()


@groove.aggregate
class Studio:
    owner_id = Identifier(required=True, unique=True)
    name = String(required=True, max_length=100)
    localization = String(max_length=255)
    image_url = String(max_length=1000)
    address_url = String(max_length=1000)
    membership_requests = HasMany(MembershipRequest)
    created_at = DateTime()

    @classmethod
    def create(cls, owner_id, name, localization=None, image_url=None, address_url=None):
        now = datetime.now(UTC)
        studio = cls(
            owner_id=owner_id,
            name=name,
            localization=localization,
            image_url=image_url,
            address_url=address_url,
            created_at=now,
        )
        studio.raise_(
            StudioCreated(
                studio_id=studio.id,
                owner_id=owner_id,
                name=name,
                created_at=now,
            )
        )
        return studio

    def find_request(self, request_id):
        request = next((r for r in self.membership_requests if str(r.id) == str(request_id)), None)
        if request is None:
            raise ValidationError({"request_id": ["Membership request not found"]})
        return request

    def has_pending_request_from(self, artist_id):
        return any(str(r.artist_id) == str(artist_id) for r in self.membership_requests)

    def request_membership(self, artist_id):
        if self.has_pending_request_from(artist_id):
            raise ValidationError({"artist_id": ["Artist already requested to join this studio"]})

        request = MembershipRequest(artist_id=artist_id, requested_at=datetime.now(UTC))
        self.add_membership_requests(request)
        self.raise_(
            MembershipRequested(
                studio_id=self.id,
                request_id=request.id,
                artist_id=artist_id,
            )
        )
        return request

    def accept_request(self, request_id):
        """Remove the pending request and return the accepted artist's id."""
        request = self.find_request(request_id)
        artist_id = str(request.artist_id)

        self.remove_membership_requests(request)
        self.raise_(
            MembershipRequestAccepted(
                studio_id=self.id,
                request_id=request_id,
                artist_id=artist_id,
            )
        )
        return artist_id

    def decline_request(self, request_id):
        request = self.find_request(request_id)

        self.remove_membership_requests(request)
        self.raise_(
            MembershipRequestDeclined(
                studio_id=self.id,
                request_id=request_id,
                artist_id=request.artist_id,
            )
        )
