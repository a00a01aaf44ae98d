"""Application tests for account commands."""

import pytest
from groove.identity.account.account import Account
from groove.identity.account.balance import CreditBalance, DebitBalance
from groove.identity.account.information import ChangeAccountRole, UpdateUserInformation
from groove.identity.account.likes import LikeAlbum, LikeTrack, UnlikeTrack
from groove.identity.account.registration import RegisterAccount
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


class TestRegisterAccountCommand:
    def test_register_persists_with_starting_balance(self):
        account_id = current_domain.process(
            RegisterAccount(email="ania@example.com", display_name="Ania"),
            asynchronous=False,
        )
        account = current_domain.repository_for(Account).get(account_id)
        assert account.email == "ania@example.com"
        assert account.role == "Listener"
        assert account.balance == 1000.0

    def test_starting_balance_comes_from_settings(self, monkeypatch):
        monkeypatch.setenv("GROOVE_STARTING_BALANCE", "25.0")
        account_id = current_domain.process(
            RegisterAccount(email="ania@example.com", display_name="Ania"),
            asynchronous=False,
        )
        assert current_domain.repository_for(Account).get(account_id).balance == 25.0

    def test_duplicate_email_is_rejected(self, register):
        register(email="ania@example.com")
        with pytest.raises(ValidationError) as exc:
            register(email="ANIA@example.com", display_name="Someone Else")
        assert exc.value.messages["email"] == ["Email is already registered"]


class TestAccountInformationCommands:
    def test_update_user_information(self, listener_id):
        current_domain.process(
            UpdateUserInformation(account_id=listener_id, city="Poznań", country="PL"),
            asynchronous=False,
        )
        account = current_domain.repository_for(Account).get(listener_id)
        assert account.user_information.city == "Poznań"
        assert account.user_information.country == "PL"

    def test_change_role(self, listener_id):
        current_domain.process(ChangeAccountRole(account_id=listener_id, role="Artist"), asynchronous=False)
        assert current_domain.repository_for(Account).get(listener_id).role == "Artist"

    def test_unknown_account(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateUserInformation(account_id="missing", city="Poznań"),
                asynchronous=False,
            )


class TestLikeCommands:
    def test_like_existing_track(self, listener_id, paid_track_id):
        current_domain.process(LikeTrack(account_id=listener_id, track_id=paid_track_id), asynchronous=False)
        account = current_domain.repository_for(Account).get(listener_id)
        assert account.likes_track(paid_track_id)

    def test_like_twice_fails(self, listener_id, paid_track_id):
        current_domain.process(LikeTrack(account_id=listener_id, track_id=paid_track_id), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(LikeTrack(account_id=listener_id, track_id=paid_track_id), asynchronous=False)

    def test_like_unknown_track_fails(self, listener_id):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(LikeTrack(account_id=listener_id, track_id="missing"), asynchronous=False)

    def test_unlike_track(self, listener_id, paid_track_id):
        current_domain.process(LikeTrack(account_id=listener_id, track_id=paid_track_id), asynchronous=False)
        current_domain.process(UnlikeTrack(account_id=listener_id, track_id=paid_track_id), asynchronous=False)
        account = current_domain.repository_for(Account).get(listener_id)
        assert len(account.track_likes) == 0

    def test_like_album(self, listener_id, paid_album_id):
        current_domain.process(LikeAlbum(account_id=listener_id, album_id=paid_album_id), asynchronous=False)
        account = current_domain.repository_for(Account).get(listener_id)
        assert account.likes_album(paid_album_id)


class TestBalanceCommands:
    def test_credit_returns_new_balance(self, listener_id):
        balance = current_domain.process(
            CreditBalance(account_id=listener_id, amount=50.0, reference="top-up"),
            asynchronous=False,
        )
        assert balance == 1050.0
        assert current_domain.repository_for(Account).get(listener_id).balance == 1050.0

    def test_debit_beyond_balance_leaves_balance_untouched(self, listener_id):
        with pytest.raises(ValidationError):
            current_domain.process(DebitBalance(account_id=listener_id, amount=1000.01), asynchronous=False)
        assert current_domain.repository_for(Account).get(listener_id).balance == 1000.0
