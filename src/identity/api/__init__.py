"""Identity domain API package."""

from identity.api.routes import auth_router, profile_router

__all__ = ["auth_router", "profile_router"]
