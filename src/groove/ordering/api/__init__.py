"""Ordering API package."""

from groove.ordering.api.routes import cart_router, library_router

__all__ = ["cart_router", "library_router"]
