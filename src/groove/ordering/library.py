"""The listener's library: order history, purchased releases and downloads.

Download rights come only from Paid orders. Withdrawn releases stay
downloadable for accounts that bought them.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from groove.catalogue.album.album import Album
from groove.catalogue.lookup import ItemType
from groove.catalogue.track.track import Track
from groove.ordering.order.order import Order, OrderStatus


@dataclass(frozen=True)
class Download:
    name: str
    blob_url: str


def orders_for(account_id):
    orders = current_domain.repository_for(Order)._dao.query.filter(account_id=str(account_id)).all().items
    return sorted(orders, key=lambda o: o.placed_at, reverse=True)


def get_order_for(account_id, order_id):
    order = current_domain.repository_for(Order).get(order_id)
    if str(order.account_id) != str(account_id):
        raise ObjectNotFoundError({"_entity": f"Order {order_id} not found"})
    return order


def _paid_orders(account_id):
    return (
        current_domain.repository_for(Order)
        ._dao.query.filter(account_id=str(account_id), status=OrderStatus.PAID.value)
        .all()
        .items
    )


def _purchased_ids(account_id, item_type):
    ids = []
    for order in _paid_orders(account_id):
        for line in order.lines:
            if line.item_type == item_type.value and str(line.item_id) not in ids:
                ids.append(str(line.item_id))
    return ids


def purchased_tracks(account_id):
    repo = current_domain.repository_for(Track)
    return [repo.get(track_id) for track_id in _purchased_ids(account_id, ItemType.TRACK)]


def purchased_albums(account_id):
    repo = current_domain.repository_for(Album)
    return [repo.get(album_id) for album_id in _purchased_ids(account_id, ItemType.ALBUM)]


def _album_downloads(album):
    return [Download(name=t.title, blob_url=t.blob_url) for t in album.ordered_tracks()]


def order_downloads(account_id, order_id):
    """Every file the paid order grants, tracks and album tracks alike.

    An album that has no tracks yet contributes nothing here, so the rest of
    the order stays downloadable; asking for that album alone is a 404
    (see ``album_downloads``).
    """
    order = get_order_for(account_id, order_id)
    if not order.is_paid:
        raise ValidationError({"order_id": ["Order is not paid"]})

    downloads = []
    for line in order.lines:
        if line.item_type == ItemType.TRACK.value:
            track = current_domain.repository_for(Track).get(line.item_id)
            downloads.append(Download(name=track.title, blob_url=track.blob_url))
        else:
            album = current_domain.repository_for(Album).get(line.item_id)
            downloads.extend(_album_downloads(album))
    return downloads


def track_download(account_id, track_id):
    if str(track_id) not in _purchased_ids(account_id, ItemType.TRACK):
        raise ValidationError({"track_id": ["Track was not purchased"]})

    track = current_domain.repository_for(Track).get(track_id)
    return Download(name=track.title, blob_url=track.blob_url)


def album_downloads(account_id, album_id):
    if str(album_id) not in _purchased_ids(account_id, ItemType.ALBUM):
        raise ValidationError({"album_id": ["Album was not purchased"]})

    album = current_domain.repository_for(Album).get(album_id)
    if not album.tracks:
        raise ObjectNotFoundError({"_entity": f"Album {album_id} has no tracks"})
    return _album_downloads(album)
