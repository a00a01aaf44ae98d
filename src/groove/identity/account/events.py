"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from groove.domain import groove


@groove.event(part_of="Account")
class AccountRegistered:
    """A new user registered on the marketplace."""

    __version__ = 1

    account_id = Identifier(required=True)
    email = String(required=True)
    display_name = String(required=True)
    role = String(required=True)
    balance = Float()
    registered_at = DateTime(required=True)


@groove.event(part_of="Account")
class UserInformationUpdated:
    __version__ = 1

    account_id = Identifier(required=True)
    street = String()
    city = String()
    postal_code = String()
    country = String()


@groove.event(part_of="Account")
class AccountRoleChanged:
    """The account became an artist or a studio owner."""

    __version__ = 1

    account_id = Identifier(required=True)
    previous_role = String(required=True)
    new_role = String(required=True)


@groove.event(part_of="Account")
class TrackLiked:
    __version__ = 1

    account_id = Identifier(required=True)
    track_id = Identifier(required=True)


@groove.event(part_of="Account")
class TrackUnliked:
    __version__ = 1

    account_id = Identifier(required=True)
    track_id = Identifier(required=True)


@groove.event(part_of="Account")
class AlbumLiked:
    __version__ = 1

    account_id = Identifier(required=True)
    album_id = Identifier(required=True)


@groove.event(part_of="Account")
class AlbumUnliked:
    __version__ = 1

    account_id = Identifier(required=True)
    album_id = Identifier(required=True)


@groove.event(part_of="Account")
class BalanceCredited:
    """Money was added to the account wallet, e.g. by a PayPal top-up."""

    __version__ = 1

    account_id = Identifier(required=True)
    amount = Float(required=True)
    new_balance = Float(required=True)
    reference = String()


@groove.event(part_of="Account")
class BalanceDebited:
    """Money was taken from the account wallet to pay for a cart."""

    __version__ = 1

    account_id = Identifier(required=True)
    amount = Float(required=True)
    new_balance = Float(required=True)
    reference = String()
