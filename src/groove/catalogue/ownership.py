"""Release ownership checks shared by track and album publishing."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from groove.catalogue.artist.artist import Artist
from groove.catalogue.studio.studio import Studio


def verify_release_owner(artist_id=None, studio_id=None):
    """Ensure the referenced artist and studio exist and agree with each other.

    An artist publishing under a studio label must be a member of that studio.
    """
    artist = current_domain.repository_for(Artist).get(artist_id) if artist_id else None
    if studio_id:
        current_domain.repository_for(Studio).get(studio_id)

    if artist is not None and studio_id and str(artist.studio_id) != str(studio_id):
        raise ValidationError({"artist_id": ["Artist is not a member of this studio"]})
