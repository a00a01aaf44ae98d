"""Tests for the Track and Album aggregates."""

import pytest
from groove.catalogue.album.album import Album
from groove.catalogue.album.events import AlbumPublished, AlbumTrackAdded, AlbumTrackRemoved
from groove.catalogue.track.events import TrackPublished, TrackWithdrawn
from groove.catalogue.track.track import Track
from protean.exceptions import ValidationError


def _make_track(**overrides):
    defaults = {
        "title": "Night Drive",
        "blob_url": "https://blobs.example.com/night-drive.mp3",
        "studio_id": "studio-001",
        "price": 4.99,
    }
    defaults.update(overrides)
    return Track.publish(**defaults)


def _make_album(**overrides):
    defaults = {
        "title": "Late Hours",
        "studio_id": "studio-001",
        "price": 19.9,
        "tracks": [
            {"title": "Intro", "blob_url": "https://blobs.example.com/1.mp3"},
            {"title": "Outro", "blob_url": "https://blobs.example.com/2.mp3"},
        ],
    }
    defaults.update(overrides)
    return Album.publish(**defaults)


class TestTrackPublishing:
    def test_publish_paid_studio_track(self):
        track = _make_track()
        assert track.is_paid
        assert track.visible
        assert track.published_at is not None
        assert isinstance(track._events[-1], TrackPublished)

    def test_artist_publishes_free_track(self):
        track = _make_track(studio_id=None, artist_id="artist-001", price=0.0)
        assert not track.is_paid

    def test_artist_cannot_sell_without_studio(self):
        with pytest.raises(ValidationError) as exc:
            _make_track(studio_id=None, artist_id="artist-001", price=2.0)
        assert exc.value.messages["price"] == ["Only studio releases can be sold"]

    def test_track_needs_an_owner(self):
        with pytest.raises(ValidationError):
            _make_track(studio_id=None, artist_id=None, price=0.0)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_track(price=-1.0)


class TestTrackMaintenance:
    def test_update_details(self):
        track = _make_track()
        track.update_details(title="Night Drive (Remaster)", price=5.49)
        assert track.title == "Night Drive (Remaster)"
        assert track.price == 5.49

    def test_withdraw_hides_track(self):
        track = _make_track()
        track.withdraw()
        assert track.visible is False
        assert isinstance(track._events[-1], TrackWithdrawn)

    def test_withdraw_twice_fails(self):
        track = _make_track()
        track.withdraw()
        with pytest.raises(ValidationError):
            track.withdraw()


class TestAlbum:
    def test_publish_numbers_tracks_in_order(self):
        album = _make_album()
        assert [t.title for t in album.ordered_tracks()] == ["Intro", "Outro"]
        assert [t.position for t in album.ordered_tracks()] == [1, 2]

        event = album._events[-1]
        assert isinstance(event, AlbumPublished)
        assert event.track_count == 2

    def test_add_track_goes_last(self):
        album = _make_album()
        track = album.add_track("Bonus", "https://blobs.example.com/3.mp3")
        assert track.position == 3
        assert album.ordered_tracks()[-1].title == "Bonus"
        assert isinstance(album._events[-1], AlbumTrackAdded)

    def test_remove_track(self):
        album = _make_album()
        first = album.ordered_tracks()[0]
        album.remove_track(first.id)
        assert [t.title for t in album.tracks] == ["Outro"]
        assert isinstance(album._events[-1], AlbumTrackRemoved)

    def test_remove_unknown_track_fails(self):
        album = _make_album()
        with pytest.raises(ValidationError):
            album.remove_track("missing")

    def test_artist_album_must_be_free(self):
        with pytest.raises(ValidationError):
            _make_album(studio_id=None, artist_id="artist-001")

    def test_withdraw(self):
        album = _make_album()
        album.withdraw()
        assert album.visible is False
