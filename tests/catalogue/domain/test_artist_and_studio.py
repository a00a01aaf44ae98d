"""Tests for the Artist and Studio aggregates."""

import pytest
from groove.catalogue.artist.artist import Artist
from groove.catalogue.artist.events import ArtistJoinedStudio, ArtistLeftStudio
from groove.catalogue.studio.events import MembershipRequestAccepted, MembershipRequested
from groove.catalogue.studio.studio import Studio
from protean.exceptions import ValidationError


def _make_artist():
    return Artist.create(account_id="acc-001", name="Mela", description="Synth pop")


def _make_studio():
    return Studio.create(owner_id="acc-002", name="Blue Room", localization="Kraków")


class TestArtist:
    def test_update_profile_keeps_unset_fields(self):
        artist = _make_artist()
        artist.update_profile(image_url="https://img.example.com/mela.png")
        assert artist.name == "Mela"
        assert artist.description == "Synth pop"
        assert artist.image_url == "https://img.example.com/mela.png"

    def test_join_and_leave_studio(self):
        artist = _make_artist()
        artist.join_studio("studio-001")
        assert artist.studio_id == "studio-001"
        assert isinstance(artist._events[-1], ArtistJoinedStudio)

        artist.leave_studio()
        assert artist.studio_id is None
        assert isinstance(artist._events[-1], ArtistLeftStudio)

    def test_cannot_join_second_studio(self):
        artist = _make_artist()
        artist.join_studio("studio-001")
        with pytest.raises(ValidationError):
            artist.join_studio("studio-002")

    def test_cannot_leave_without_studio(self):
        with pytest.raises(ValidationError):
            _make_artist().leave_studio()


class TestMembershipRequests:
    def test_request_membership(self):
        studio = _make_studio()
        request = studio.request_membership("artist-001")
        assert studio.has_pending_request_from("artist-001")
        assert isinstance(studio._events[-1], MembershipRequested)
        assert studio._events[-1].request_id == request.id

    def test_duplicate_request_rejected(self):
        studio = _make_studio()
        studio.request_membership("artist-001")
        with pytest.raises(ValidationError):
            studio.request_membership("artist-001")

    def test_accept_returns_artist_and_clears_request(self):
        studio = _make_studio()
        request = studio.request_membership("artist-001")
        assert studio.accept_request(request.id) == "artist-001"
        assert len(studio.membership_requests) == 0
        assert isinstance(studio._events[-1], MembershipRequestAccepted)

    def test_decline_clears_request(self):
        studio = _make_studio()
        request = studio.request_membership("artist-001")
        studio.decline_request(request.id)
        assert not studio.has_pending_request_from("artist-001")

    def test_unknown_request(self):
        with pytest.raises(ValidationError):
            _make_studio().accept_request("missing")
