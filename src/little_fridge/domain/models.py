"""Domain models for authenticated users."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """Identity returned by the identity provider."""

    id: UUID
    email: str | None
    name: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class AuthSession:
    """Tokens issued by the identity provider on sign in."""

    access_token: str
    refresh_token: str | None
    expires_at: int | None


@dataclass(frozen=True)
class UserProfile:
    """Application-side user row."""

    id: UUID
    email: str | None
    name: str | None
