"""Catalogue API package."""

from groove.catalogue.api.routes import album_router, artist_router, studio_router, track_router

__all__ = ["artist_router", "studio_router", "track_router", "album_router"]
