"""Catalogue queries: browsing releases and resolving items that can be bought."""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from groove.catalogue.album.album import Album
from groove.catalogue.artist.artist import Artist
from groove.catalogue.track.track import Track


class ItemType(Enum):
    TRACK = "Track"
    ALBUM = "Album"


_RELEASE_CLASSES = {
    ItemType.TRACK: Track,
    ItemType.ALBUM: Album,
}


@dataclass(frozen=True)
class PurchasableItem:
    """Price and title of a release at the moment it is put in a cart."""

    item_type: str
    item_id: str
    title: str
    price: float


def find_purchasable(item_type, item_id) -> PurchasableItem:
    """Resolve a paid, visible track or album, rejecting anything that cannot be bought."""
    try:
        release_type = ItemType(item_type)
    except ValueError:
        raise ValidationError({"item_type": [f"Unknown item type: {item_type}"]}) from None

    try:
        release = current_domain.repository_for(_RELEASE_CLASSES[release_type]).get(item_id)
    except ObjectNotFoundError:
        raise ValidationError({"item_id": [f"{release_type.value} not found"]}) from None

    if not release.visible:
        raise ValidationError({"item_id": [f"{release_type.value} is no longer available"]})
    if not release.is_paid:
        raise ValidationError({"item_id": [f"{release_type.value} is free and cannot be bought"]})

    return PurchasableItem(
        item_type=release_type.value,
        item_id=str(release.id),
        title=release.title,
        price=release.price,
    )


def _browse(release_cls, artist_id=None, studio_id=None, paid=None):
    filters = {"visible": True}
    if artist_id:
        filters["artist_id"] = artist_id
    if studio_id:
        filters["studio_id"] = studio_id

    releases = current_domain.repository_for(release_cls)._dao.query.filter(**filters).all().items
    if paid is not None:
        releases = [r for r in releases if r.is_paid == paid]
    return sorted(releases, key=lambda r: r.published_at, reverse=True)


def browse_tracks(artist_id=None, studio_id=None, paid=None):
    return _browse(Track, artist_id=artist_id, studio_id=studio_id, paid=paid)


def browse_albums(artist_id=None, studio_id=None, paid=None):
    return _browse(Album, artist_id=artist_id, studio_id=studio_id, paid=paid)


def studio_members(studio_id):
    return current_domain.repository_for(Artist)._dao.query.filter(studio_id=studio_id).all().items
