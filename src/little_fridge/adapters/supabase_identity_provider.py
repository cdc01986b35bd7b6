"""Supabase Auth identity provider adapter."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from little_fridge.domain.models import AuthSession, AuthUser
from little_fridge.errors import IdentityProviderError
from little_fridge.services.auth import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth.

    Uses its own client so that sign-in sessions never replace the service
    key on the client used for table access.
    """

    client: Client

    def get_user(self, token: str) -> AuthUser | None:
        """Verify a bearer token with Supabase Auth."""
        try:
            response = self.client.auth.get_user(token)
        except AuthError:
            logger.info("Rejected bearer token")
            return None
        if response is None or response.user is None:
            return None
        return _to_auth_user(response.user)

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Register an account with Supabase Auth."""
        try:
            response = self.client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"name": name}},
                }
            )
        except AuthError as exc:
            raise IdentityProviderError(str(exc)) from exc
        if response.user is None:
            raise IdentityProviderError("Sign up did not return a user")
        return _to_auth_user(response.user), _to_session(response.session)

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthSession]:
        """Sign in with email and password."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise IdentityProviderError(str(exc)) from exc
        session = _to_session(response.session)
        if response.user is None or session is None:
            raise IdentityProviderError("Invalid login credentials")
        return _to_auth_user(response.user), session

    def sign_out(self, token: str) -> None:
        """Revoke the session that issued the token."""
        try:
            self.client.auth.admin.sign_out(token)
        except AuthError as exc:
            raise IdentityProviderError(str(exc)) from exc


def _to_auth_user(user: object) -> AuthUser:
    metadata = getattr(user, "user_metadata", None) or {}
    return AuthUser(
        id=UUID(str(user.id)),
        email=getattr(user, "email", None),
        name=metadata.get("name"),
        created_at=getattr(user, "created_at", None),
    )


def _to_session(session: object | None) -> AuthSession | None:
    if session is None:
        return None
    return AuthSession(
        access_token=session.access_token,
        refresh_token=getattr(session, "refresh_token", None),
        expires_at=getattr(session, "expires_at", None),
    )
