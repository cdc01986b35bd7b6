"""Authentication delegated to the identity provider."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from little_fridge.domain.models import AuthSession, AuthUser, UserProfile
from little_fridge.errors import (
    IdentityProviderError,
    InternalError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface for the external identity provider."""

    def get_user(self, token: str) -> AuthUser | None:
        """Return the user for a bearer token, or None when it is invalid."""

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Register an account."""

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthSession]:
        """Exchange credentials for a session."""

    def sign_out(self, token: str) -> None:
        """Revoke the session behind a token."""


class UserProfileRepository(Protocol):
    """Persistence interface for application user rows."""

    def create_profile(
        self, user_id: UUID, email: str | None, name: str | None
    ) -> UserProfile:
        """Create a user row and return it."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user row, if present."""


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and token verification."""

    identity_provider: IdentityProvider
    profile_repository: UserProfileRepository

    def verify(self, token: str | None) -> AuthUser:
        """Return the verified user for a bearer token."""
        if not token:
            raise UnauthenticatedError("Authentication required")
        user = self.identity_provider.get_user(token)
        if user is None:
            raise UnauthenticatedError("Invalid token")
        return user

    def sign_up(
        self, email: str | None, password: str | None, name: str | None = None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Create an account with the provider and a matching user row."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        try:
            user, session = self.identity_provider.sign_up(email, password, name)
        except IdentityProviderError as exc:
            raise ValidationError(exc.message) from exc

        try:
            self.profile_repository.create_profile(user.id, email, name)
        except Exception as exc:
            logger.exception(
                "Database user creation failed", extra={"user_id": str(user.id)}
            )
            raise InternalError("Account created but database sync failed") from exc
        return replace(user, name=name), session

    def sign_in(
        self, email: str | None, password: str | None
    ) -> tuple[AuthUser, AuthSession]:
        """Sign in with email and password."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        try:
            return self.identity_provider.sign_in(email, password)
        except IdentityProviderError as exc:
            raise UnauthenticatedError(exc.message) from exc

    def sign_out(self, token: str) -> None:
        """Revoke the caller's session."""
        try:
            self.identity_provider.sign_out(token)
        except IdentityProviderError as exc:
            raise ValidationError(exc.message) from exc

    def me(self, user: AuthUser) -> AuthUser:
        """Return the caller, preferring the stored profile name."""
        profile = self.profile_repository.get_profile(user.id)
        if profile and profile.name:
            return replace(user, name=profile.name)
        return user
