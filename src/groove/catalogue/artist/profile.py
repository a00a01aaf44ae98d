"""Artist profile and studio membership: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from groove.catalogue.artist.artist import Artist
from groove.catalogue.studio.studio import Studio
from groove.domain import groove
from groove.identity.account.account import Account


@groove.command(part_of="Artist")
class CreateArtistProfile:
    account_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    description = Text()
    image_url = String(max_length=1000)


@groove.command(part_of="Artist")
class UpdateArtistProfile:
    artist_id = Identifier(required=True)
    name = String(max_length=100)
    description = Text()
    image_url = String(max_length=1000)


@groove.command(part_of="Artist")
class JoinStudio:
    artist_id = Identifier(required=True)
    studio_id = Identifier(required=True)


@groove.command(part_of="Artist")
class LeaveStudio:
    artist_id = Identifier(required=True)


@groove.command_handler(part_of=Artist)
class ArtistProfileHandler:
    @handle(CreateArtistProfile)
    def create_artist_profile(self, command):
        current_domain.repository_for(Account).get(command.account_id)

        repo = current_domain.repository_for(Artist)
        if repo._dao.query.filter(account_id=command.account_id).all().items:
            raise ValidationError({"account_id": ["Account already has an artist profile"]})

        artist = Artist.create(
            account_id=command.account_id,
            name=command.name,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(artist)
        return str(artist.id)

    @handle(UpdateArtistProfile)
    def update_artist_profile(self, command):
        repo = current_domain.repository_for(Artist)
        artist = repo.get(command.artist_id)
        artist.update_profile(
            name=command.name,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(artist)

    @handle(JoinStudio)
    def join_studio(self, command):
        current_domain.repository_for(Studio).get(command.studio_id)

        repo = current_domain.repository_for(Artist)
        artist = repo.get(command.artist_id)
        artist.join_studio(command.studio_id)
        repo.add(artist)

    @handle(LeaveStudio)
    def leave_studio(self, command):
        repo = current_domain.repository_for(Artist)
        artist = repo.get(command.artist_id)
        artist.leave_studio()
        repo.add(artist)
