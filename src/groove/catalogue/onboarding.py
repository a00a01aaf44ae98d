"""Application services spanning accounts and the catalogue.

Each step is its own command, so each aggregate is changed in its own
unit of work, in the order listed.
"""

from protean.utils.globals import current_domain

from groove.catalogue.artist.profile import CreateArtistProfile, JoinStudio
from groove.catalogue.studio.management import AcceptMembershipRequest, CreateStudio
from groove.identity.account.account import AccountRole
from groove.identity.account.information import ChangeAccountRole
from groove.utils.logging import get_logger

logger = get_logger(__name__)


def become_artist(account_id, name, description=None, image_url=None) -> str:
    """Create the account's artist profile and switch the account to the artist role."""
    artist_id = current_domain.process(
        CreateArtistProfile(
            account_id=account_id,
            name=name,
            description=description,
            image_url=image_url,
        ),
        asynchronous=False,
    )
    current_domain.process(
        ChangeAccountRole(account_id=account_id, role=AccountRole.ARTIST.value),
        asynchronous=False,
    )
    logger.info("Account registered as artist", account_id=str(account_id), artist_id=artist_id)
    return artist_id


def open_studio(owner_id, name, localization=None, image_url=None, address_url=None) -> str:
    """Create a studio owned by the account and switch the account to the studio role."""
    studio_id = current_domain.process(
        CreateStudio(
            owner_id=owner_id,
            name=name,
            localization=localization,
            image_url=image_url,
            address_url=address_url,
        ),
        asynchronous=False,
    )
    current_domain.process(
        ChangeAccountRole(account_id=owner_id, role=AccountRole.STUDIO.value),
        asynchronous=False,
    )
    logger.info("Studio opened", owner_id=str(owner_id), studio_id=studio_id)
    return studio_id


def accept_membership(studio_id, request_id) -> str:
    """Accept a pending membership request and move the artist into the studio."""
    artist_id = current_domain.process(
        AcceptMembershipRequest(studio_id=studio_id, request_id=request_id),
        asynchronous=False,
    )
    current_domain.process(
        JoinStudio(artist_id=artist_id, studio_id=studio_id),
        asynchronous=False,
    )
    logger.info("Artist joined studio", studio_id=str(studio_id), artist_id=artist_id)
    return artist_id
