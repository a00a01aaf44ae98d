"""Studio management: creation and membership requests."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from groove.catalogue.artist.artist import Artist
from groove.catalogue.studio.studio import Studio
from groove.domain import groove
from groove.identity.account.account import Account


@groove.command(part_of="Studio")
class CreateStudio:
    owner_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    localization = String(max_length=255)
    image_url = String(max_length=1000)
    address_url = String(max_length=1000)


@groove.command(part_of="Studio")
class RequestStudioMembership:
    studio_id = Identifier(required=True)
    artist_id = Identifier(required=True)


@groove.command(part_of="Studio")
class AcceptMembershipRequest:
    studio_id = Identifier(required=True)
    request_id = Identifier(required=True)


@groove.command(part_of="Studio")
class DeclineMembershipRequest:
    studio_id = Identifier(required=True)
    request_id = Identifier(required=True)


@groove.command_handler(part_of=Studio)
class ManageStudioHandler:
    @handle(CreateStudio)
    def create_studio(self, command):
        current_domain.repository_for(Account).get(command.owner_id)

        repo = current_domain.repository_for(Studio)
        if repo._dao.query.filter(owner_id=command.owner_id).all().items:
            raise ValidationError({"owner_id": ["Account already owns a studio"]})

        studio = Studio.create(
            owner_id=command.owner_id,
            name=command.name,
            localization=command.localization,
            image_url=command.image_url,
            address_url=command.address_url,
        )
        repo.add(studio)
        return str(studio.id)

    @handle(RequestStudioMembership)
    def request_membership(self, command):
        artist = current_domain.repository_for(Artist).get(command.artist_id)
        if artist.studio_id:
            raise ValidationError({"artist_id": ["Artist already belongs to a studio"]})

        repo = current_domain.repository_for(Studio)
        studio = repo.get(command.studio_id)
        request = studio.request_membership(command.artist_id)
        repo.add(studio)
        return str(request.id)

    @handle(AcceptMembershipRequest)
    def accept_request(self, command):
        repo = current_domain.repository_for(Studio)
        studio = repo.get(command.studio_id)

        request = studio.find_request(command.request_id)
        artist = current_domain.repository_for(Artist).get(request.artist_id)
        if artist.studio_id:
            raise ValidationError({"artist_id": ["Artist already belongs to a studio"]})

        artist_id = studio.accept_request(command.request_id)
        repo.add(studio)
        return artist_id

    @handle(DeclineMembershipRequest)
    def decline_request(self, command):
        repo = current_domain.repository_for(Studio)
        studio = repo.get(command.studio_id)
        studio.decline_request(command.request_id)
        repo.add(studio)
