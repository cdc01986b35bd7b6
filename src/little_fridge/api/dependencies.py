"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request

from little_fridge.containers import AppContainer
from little_fridge.domain.models import AuthUser

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None


def require_user(
    token: str | None = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> AuthUser:
    """Verify the bearer token with the identity provider."""
    return container.auth_service.verify(token)
