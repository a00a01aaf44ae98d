"""Account aggregate: a registered marketplace user with likes and a wallet balance."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, String, ValueObject

from groove.domain import groove
from groove.identity.account.events import (
    AccountRegistered,
    AccountRoleChanged,
    AlbumLiked,
    AlbumUnliked,
    BalanceCredited,
    BalanceDebited,
    TrackLiked,
    TrackUnliked,
    UserInformationUpdated,
)
from groove.shared.email import EmailAddress


class AccountRole(Enum):
    LISTENER = "Listener"
    ARTIST = "Artist"
    STUDIO = "Studio"


@groove.value_object(part_of="Account")
class UserInformation:
    """Postal details shown on a user's profile."""

    street: String(max_length=255)
    city: String(max_length=100)
    postal_code: String(max_length=20)
    country: String(max_length=100)


@groove.entity(part_of="Account")
class TrackLike:
    track_id: Identifier(required=True)
    liked_at: DateTime()


@groove.entity(part_of="Account")
class AlbumLike:
    album_id: Identifier(required=True)
    liked_at: DateTime()


@groove.aggregate
class Account:
    """A person using the marketplace as a listener, an artist or a studio owner.

    The balance is the in-app wallet used for balance checkout. It starts at a
    configured amount, grows with PayPal top-ups and never drops below zero.
    """

    email: String(required=True, max_length=254, unique=True)
    display_name: String(required=True, max_length=100)
    role: String(choices=AccountRole, default=AccountRole.LISTENER.value)
    balance: Float(default=0.0)
    user_information: ValueObject(UserInformation)
    track_likes: HasMany(TrackLike)
    album_likes: HasMany(AlbumLike)
    registered_at: DateTime()

    @invariant.post
    def balance_cannot_be_negative(self):
        if self.balance is not None and self.balance < 0:
            raise ValidationError({"balance": ["Balance cannot be negative"]})

    @classmethod
    def register(cls, email, display_name, role=AccountRole.LISTENER.value, starting_balance=0.0):
        normalized = email.strip().lower()
        EmailAddress(address=normalized)
        now = datetime.now(UTC)

        account = cls(
            email=normalized,
            display_name=display_name,
            role=role,
            balance=starting_balance,
            registered_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                email=normalized,
                display_name=display_name,
                role=role,
                balance=starting_balance,
                registered_at=now,
            )
        )
        return account

    def update_user_information(self, street=None, city=None, postal_code=None, country=None):
        self.user_information = UserInformation(
            street=street,
            city=city,
            postal_code=postal_code,
            country=country,
        )
        self.raise_(
            UserInformationUpdated(
                account_id=self.id,
                street=street,
                city=city,
                postal_code=postal_code,
                country=country,
            )
        )

    def change_role(self, role):
        try:
            new_role = AccountRole(role)
        except ValueError:
            raise ValidationError({"role": [f"Unknown role: {role}"]}) from None

        if new_role.value == self.role:
            return

        previous_role = self.role
        self.role = new_role.value
        self.raise_(
            AccountRoleChanged(
                account_id=self.id,
                previous_role=previous_role,
                new_role=new_role.value,
            )
        )

    # -------------------------------------------------------------------
    # Likes
    # -------------------------------------------------------------------
    def likes_track(self, track_id):
        return any(str(like.track_id) == str(track_id) for like in self.track_likes)

    def likes_album(self, album_id):
        return any(str(like.album_id) == str(album_id) for like in self.album_likes)

    def like_track(self, track_id):
        if self.likes_track(track_id):
            raise ValidationError({"track_id": ["Track is already liked"]})

        self.add_track_likes(TrackLike(track_id=track_id, liked_at=datetime.now(UTC)))
        self.raise_(TrackLiked(account_id=self.id, track_id=track_id))

    def unlike_track(self, track_id):
        like = next((like for like in self.track_likes if str(like.track_id) == str(track_id)), None)
        if like is None:
            raise ValidationError({"track_id": ["Track is not liked"]})

        self.remove_track_likes(like)
        self.raise_(TrackUnliked(account_id=self.id, track_id=track_id))

    def like_album(self, album_id):
        if self.likes_album(album_id):
            raise ValidationError({"album_id": ["Album is already liked"]})

        self.add_album_likes(AlbumLike(album_id=album_id, liked_at=datetime.now(UTC)))
        self.raise_(AlbumLiked(account_id=self.id, album_id=album_id))

    def unlike_album(self, album_id):
        like = next((like for like in self.album_likes if str(like.album_id) == str(album_id)), None)
        if like is None:
            raise ValidationError({"album_id": ["Album is not liked"]})

        self.remove_album_likes(like)
        self.raise_(AlbumUnliked(account_id=self.id, album_id=album_id))

    # -------------------------------------------------------------------
    # Wallet
    # -------------------------------------------------------------------
    def has_funds_for(self, amount):
        return round(self.balance, 2) >= round(amount, 2)

    def credit(self, amount, reference=None):
        if amount is None or amount <= 0:
            raise ValidationError({"amount": ["Credit amount must be positive"]})

        self.balance = round(self.balance + amount, 2)
        self.raise_(
            BalanceCredited(
                account_id=self.id,
                amount=amount,
                new_balance=self.balance,
                reference=reference,
            )
        )

    def debit(self, amount, reference=None):
        if amount is None or amount <= 0:
            raise ValidationError({"amount": ["Debit amount must be positive"]})
        if not self.has_funds_for(amount):
            raise ValidationError({"balance": ["Insufficient balance"]})

        self.balance = round(self.balance - amount, 2)
        self.raise_(
            BalanceDebited(
                account_id=self.id,
                amount=amount,
                new_balance=self.balance,
                reference=reference,
            )
        )
