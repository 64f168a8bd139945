"""Ratings domain API package."""

from ratings.api.errors import register_error_handlers
from ratings.api.routes import hue_router, item_router, user_router

__all__ = ["item_router", "user_router", "hue_router", "register_error_handlers"]
