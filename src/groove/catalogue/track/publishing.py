"""Track publishing and maintenance: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from groove.catalogue.ownership import verify_release_owner
from groove.catalogue.track.track import Track
from groove.domain import groove


@groove.command(part_of="Track")
class PublishTrack:
    title = String(required=True, max_length=255)
    blob_url = String(required=True, max_length=1000)
    image_url = String(max_length=1000)
    artist_id = Identifier()
    studio_id = Identifier()
    price = Float(default=0.0, min_value=0.0)


@groove.command(part_of="Track")
class UpdateTrackDetails:
    track_id = Identifier(required=True)
    title = String(max_length=255)
    image_url = String(max_length=1000)
    price = Float(min_value=0.0)


@groove.command(part_of="Track")
class WithdrawTrack:
    track_id = Identifier(required=True)


@groove.command_handler(part_of=Track)
class TrackPublishingHandler:
    @handle(PublishTrack)
    def publish_track(self, command):
        verify_release_owner(artist_id=command.artist_id, studio_id=command.studio_id)

        track = Track.publish(
            title=command.title,
            blob_url=command.blob_url,
            image_url=command.image_url,
            artist_id=command.artist_id,
            studio_id=command.studio_id,
            price=command.price,
        )
        current_domain.repository_for(Track).add(track)
        return str(track.id)

    @handle(UpdateTrackDetails)
    def update_track_details(self, command):
        repo = current_domain.repository_for(Track)
        track = repo.get(command.track_id)
        track.update_details(
            title=command.title,
            image_url=command.image_url,
            price=command.price,
        )
        repo.add(track)

    @handle(WithdrawTrack)
    def withdraw_track(self, command):
        repo = current_domain.repository_for(Track)
        track = repo.get(command.track_id)
        track.withdraw()
        repo.add(track)
