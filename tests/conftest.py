import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


def pytest_sessionstart(session):
    """Initialize the groove domain and activate its context before tests are collected."""
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from groove.domain import groove

    groove.init()
    groove.domain_context().push()


@pytest.fixture(scope="session")
def _groove_domain():
    from groove.domain import groove

    return groove


@pytest.fixture(scope="session", autouse=True)
def setup_db(_groove_domain):
    from groove.utils.db import drop_db, setup_db

    setup_db(_groove_domain)

    yield

    drop_db(_groove_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_groove_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _groove_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def fake_gateway():
    """Every test talks to a fresh fake PayPal gateway."""
    from groove.payments.gateway import reset_gateway, set_gateway
    from groove.payments.gateway.fake_adapter import FakePayPalGateway

    gateway = FakePayPalGateway()
    set_gateway(gateway)

    yield gateway

    reset_gateway()


# ---------------------------------------------------------------------------
# Marketplace fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def register():
    """Register an account and return its id."""
    from protean import current_domain

    from groove.identity.account.registration import RegisterAccount

    def _register(email="ania@example.com", display_name="Ania", role="Listener"):
        return current_domain.process(
            RegisterAccount(email=email, display_name=display_name, role=role),
            asynchronous=False,
        )

    return _register


@pytest.fixture()
def listener_id(register):
    return register()


@pytest.fixture()
def studio_id(register):
    from groove.catalogue.onboarding import open_studio

    owner_id = register(email="owner@studio.example.com", display_name="Studio Owner")
    return open_studio(owner_id=owner_id, name="Blue Room", localization="Kraków")


@pytest.fixture()
def publish_track(studio_id):
    """Publish a track sold by the studio and return its id."""
    from protean import current_domain

    from groove.catalogue.track.publishing import PublishTrack

    def _publish(title="Night Drive", price=4.99):
        return current_domain.process(
            PublishTrack(
                title=title,
                blob_url=f"https://blobs.example.com/tracks/{title.lower().replace(' ', '-')}.mp3",
                studio_id=studio_id,
                price=price,
            ),
            asynchronous=False,
        )

    return _publish


@pytest.fixture()
def paid_track_id(publish_track):
    return publish_track()


@pytest.fixture()
def paid_album_id(studio_id):
    import json

    from protean import current_domain

    from groove.catalogue.album.publishing import PublishAlbum

    return current_domain.process(
        PublishAlbum(
            title="Late Hours",
            studio_id=studio_id,
            price=19.90,
            tracks=json.dumps(
                [
                    {"title": "Intro", "blob_url": "https://blobs.example.com/albums/late-hours/1.mp3"},
                    {"title": "Late Hours", "blob_url": "https://blobs.example.com/albums/late-hours/2.mp3"},
                ]
            ),
        ),
        asynchronous=False,
    )
