"""Fridge membership and invite code redemption."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from little_fridge.domain.fridges import Fridge, FridgeMembership
from little_fridge.errors import (
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UniqueViolationError,
    ValidationError,
)
from little_fridge.services.invite_codes import CodeGenerator, normalize_code

logger = logging.getLogger(__name__)

DEFAULT_MAX_CODE_ATTEMPTS = 10


class FridgeRepository(Protocol):
    """Persistence interface for fridges and memberships."""

    def create_fridge_with_member(
        self, group_name: str, invite_code: str, user_id: UUID
    ) -> Fridge:
        """Create a fridge and its creator's membership in one transaction.

        Raises ``UniqueViolationError`` when the invite code is taken.
        """

    def get_by_invite_code(self, invite_code: str) -> Fridge | None:
        """Return the fridge for an invite code, if present."""

    def add_member(self, fridge_id: UUID, user_id: UUID) -> None:
        """Insert a membership row.

        Raises ``UniqueViolationError`` when the pair already exists.
        """

    def list_memberships(self, user_id: UUID) -> list[FridgeMembership]:
        """Return every fridge the user belongs to."""

    def is_member(self, user_id: UUID, fridge_id: UUID) -> bool:
        """Return true when a membership row exists for the pair."""


@dataclass
class FridgeService:
    """Creates fridges, admits members and answers access checks."""

    repository: FridgeRepository
    code_generator: CodeGenerator
    max_code_attempts: int = DEFAULT_MAX_CODE_ATTEMPTS

    def create_fridge(self, name: str | None, creator_user_id: UUID) -> Fridge:
        """Create a fridge with a fresh invite code and add its creator."""
        group_name = (name or "").strip()
        if not group_name:
            raise ValidationError("Group name is required")

        for attempt in range(1, self.max_code_attempts + 1):
            invite_code = self.code_generator.generate()
            try:
                fridge = self.repository.create_fridge_with_member(
                    group_name=group_name,
                    invite_code=invite_code,
                    user_id=creator_user_id,
                )
            except UniqueViolationError:
                logger.warning(
                    "Invite code collision, retrying",
                    extra={"attempt": attempt},
                )
                continue
            logger.info(
                "Created fridge",
                extra={"fridge_id": str(fridge.id), "user_id": str(creator_user_id)},
            )
            return fridge

        logger.error(
            "Invite code attempts exhausted",
            extra={"attempts": self.max_code_attempts},
        )
        raise InternalError("Failed to create fridge group")

    def join_fridge(self, code: str | None, user_id: UUID) -> Fridge:
        """Redeem an invite code for the user."""
        invite_code = normalize_code(code or "")
        if not invite_code:
            raise ValidationError("Invite code is required")

        fridge = self.repository.get_by_invite_code(invite_code)
        if fridge is None:
            raise NotFoundError("Invalid invite code")

        try:
            self.repository.add_member(fridge.id, user_id)
        except UniqueViolationError as exc:
            raise ConflictError("Already a member of this fridge") from exc

        logger.info(
            "User joined fridge",
            extra={"fridge_id": str(fridge.id), "user_id": str(user_id)},
        )
        return fridge

    def list_fridges_for_user(self, user_id: UUID) -> list[FridgeMembership]:
        """Return the user's fridges, most recently joined first."""
        memberships = self.repository.list_memberships(user_id)
        return sorted(
            memberships,
            key=lambda membership: (membership.joined_at, str(membership.fridge.id)),
            reverse=True,
        )

    def has_access(self, user_id: UUID, fridge_id: UUID) -> bool:
        """Return true when the user is a member of the fridge."""
        return self.repository.is_member(user_id, fridge_id)

    def require_access(self, user_id: UUID, fridge_id: UUID) -> None:
        """Raise ``ForbiddenError`` unless the user is a member."""
        if not self.has_access(user_id, fridge_id):
            raise ForbiddenError("You do not have access to this fridge")
