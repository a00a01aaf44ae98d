"""Application tests for artist, studio and release commands."""

import json

import pytest
from groove.catalogue.album.album import Album
from groove.catalogue.album.publishing import AddAlbumTrack, PublishAlbum, RemoveAlbumTrack
from groove.catalogue.artist.artist import Artist
from groove.catalogue.artist.profile import CreateArtistProfile, LeaveStudio
from groove.catalogue.onboarding import accept_membership, become_artist, open_studio
from groove.catalogue.studio.management import (
    CreateStudio,
    DeclineMembershipRequest,
    RequestStudioMembership,
)
from groove.catalogue.studio.studio import Studio
from groove.catalogue.track.publishing import PublishTrack, UpdateTrackDetails, WithdrawTrack
from groove.catalogue.track.track import Track
from groove.identity.account.account import Account
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


@pytest.fixture()
def artist_id(register):
    account_id = register(email="mela@example.com", display_name="Mela")
    return become_artist(account_id=account_id, name="Mela")


def _request_membership(studio_id, artist_id):
    return current_domain.process(
        RequestStudioMembership(studio_id=studio_id, artist_id=artist_id),
        asynchronous=False,
    )


class TestOnboarding:
    def test_become_artist_switches_role(self, register):
        account_id = register()
        artist_id = become_artist(account_id=account_id, name="Ania", description="Lo-fi")

        artist = current_domain.repository_for(Artist).get(artist_id)
        assert artist.account_id == account_id
        assert current_domain.repository_for(Account).get(account_id).role == "Artist"

    def test_one_artist_profile_per_account(self, register):
        account_id = register()
        become_artist(account_id=account_id, name="Ania")
        with pytest.raises(ValidationError):
            current_domain.process(CreateArtistProfile(account_id=account_id, name="Again"), asynchronous=False)

    def test_artist_profile_for_unknown_account(self):
        with pytest.raises(ObjectNotFoundError):
            become_artist(account_id="missing", name="Ghost")

    def test_open_studio_switches_role(self, register):
        owner_id = register()
        studio_id = open_studio(owner_id=owner_id, name="Blue Room")
        assert current_domain.repository_for(Studio).get(studio_id).owner_id == owner_id
        assert current_domain.repository_for(Account).get(owner_id).role == "Studio"

    def test_one_studio_per_owner(self, register):
        owner_id = register()
        open_studio(owner_id=owner_id, name="Blue Room")
        with pytest.raises(ValidationError):
            current_domain.process(CreateStudio(owner_id=owner_id, name="Red Room"), asynchronous=False)


class TestStudioMembership:
    def test_accept_moves_artist_into_studio(self, studio_id, artist_id):
        request_id = _request_membership(studio_id, artist_id)
        assert accept_membership(studio_id=studio_id, request_id=request_id) == artist_id

        assert current_domain.repository_for(Artist).get(artist_id).studio_id == studio_id
        assert len(current_domain.repository_for(Studio).get(studio_id).membership_requests) == 0

    def test_member_cannot_request_again(self, studio_id, artist_id):
        accept_membership(studio_id=studio_id, request_id=_request_membership(studio_id, artist_id))
        with pytest.raises(ValidationError):
            _request_membership(studio_id, artist_id)

    def test_second_studio_cannot_accept_a_member(self, register, studio_id, artist_id):
        other_owner = register(email="owner@red.example.com", display_name="Red Owner")
        other_studio_id = open_studio(owner_id=other_owner, name="Red Room")
        first_request = _request_membership(studio_id, artist_id)
        second_request = _request_membership(other_studio_id, artist_id)

        accept_membership(studio_id=studio_id, request_id=first_request)
        with pytest.raises(ValidationError) as exc:
            accept_membership(studio_id=other_studio_id, request_id=second_request)

        assert exc.value.messages["artist_id"] == ["Artist already belongs to a studio"]
        assert current_domain.repository_for(Artist).get(artist_id).studio_id == studio_id
        # The rejected request stays pending, so the studio can still decline it
        other_studio = current_domain.repository_for(Studio).get(other_studio_id)
        assert [str(r.id) for r in other_studio.membership_requests] == [second_request]

    def test_decline(self, studio_id, artist_id):
        request_id = _request_membership(studio_id, artist_id)
        current_domain.process(
            DeclineMembershipRequest(studio_id=studio_id, request_id=request_id),
            asynchronous=False,
        )
        assert current_domain.repository_for(Artist).get(artist_id).studio_id is None

    def test_leave_studio(self, studio_id, artist_id):
        accept_membership(studio_id=studio_id, request_id=_request_membership(studio_id, artist_id))
        current_domain.process(LeaveStudio(artist_id=artist_id), asynchronous=False)
        assert current_domain.repository_for(Artist).get(artist_id).studio_id is None


class TestTrackPublishing:
    def test_artist_publishes_free_track(self, artist_id):
        track_id = current_domain.process(
            PublishTrack(title="Demo", blob_url="https://blobs.example.com/demo.mp3", artist_id=artist_id),
            asynchronous=False,
        )
        assert not current_domain.repository_for(Track).get(track_id).is_paid

    def test_unknown_studio_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                PublishTrack(title="Demo", blob_url="https://b/x.mp3", studio_id="missing", price=1.0),
                asynchronous=False,
            )

    def test_artist_outside_studio_cannot_publish_under_it(self, studio_id, artist_id):
        with pytest.raises(ValidationError):
            current_domain.process(
                PublishTrack(
                    title="Demo",
                    blob_url="https://b/x.mp3",
                    artist_id=artist_id,
                    studio_id=studio_id,
                    price=1.0,
                ),
                asynchronous=False,
            )

    def test_update_and_withdraw(self, paid_track_id):
        current_domain.process(UpdateTrackDetails(track_id=paid_track_id, price=6.0), asynchronous=False)
        current_domain.process(WithdrawTrack(track_id=paid_track_id), asynchronous=False)

        track = current_domain.repository_for(Track).get(paid_track_id)
        assert track.price == 6.0
        assert track.visible is False


class TestAlbumPublishing:
    def test_publish_album_with_tracks(self, paid_album_id):
        album = current_domain.repository_for(Album).get(paid_album_id)
        assert album.price == 19.9
        assert [t.title for t in album.ordered_tracks()] == ["Intro", "Late Hours"]

    def test_publish_album_without_tracks(self, studio_id):
        album_id = current_domain.process(
            PublishAlbum(title="Empty", studio_id=studio_id, tracks=json.dumps([])),
            asynchronous=False,
        )
        assert len(current_domain.repository_for(Album).get(album_id).tracks) == 0

    def test_add_and_remove_track(self, paid_album_id):
        album_track_id = current_domain.process(
            AddAlbumTrack(album_id=paid_album_id, title="Bonus", blob_url="https://b/bonus.mp3"),
            asynchronous=False,
        )
        album = current_domain.repository_for(Album).get(paid_album_id)
        assert album.ordered_tracks()[-1].title == "Bonus"

        current_domain.process(
            RemoveAlbumTrack(album_id=paid_album_id, album_track_id=album_track_id),
            asynchronous=False,
        )
        album = current_domain.repository_for(Album).get(paid_album_id)
        assert len(album.tracks) == 2
