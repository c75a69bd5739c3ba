"""Application layer services."""

from roster_identity.application.services.user_service import UserService

__all__ = ["UserService"]
