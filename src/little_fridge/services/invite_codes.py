"""Invite code generation."""

import secrets
from dataclasses import dataclass
from typing import Protocol

# Uppercase letters and digits without 0/O and 1/I.
INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
INVITE_CODE_LENGTH = 6


class CodeGenerator(Protocol):
    """Interface for invite code generators."""

    def generate(self) -> str:
        """Return a new candidate invite code."""


@dataclass
class InviteCodeGenerator(CodeGenerator):
    """Random invite codes from an unambiguous alphabet."""

    length: int = INVITE_CODE_LENGTH
    alphabet: str = INVITE_CODE_ALPHABET

    def generate(self) -> str:
        """Return a random code; uniqueness is enforced by storage."""
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))


def normalize_code(raw: str) -> str:
    """Normalize user-entered invite codes for lookup."""
    return raw.strip().upper()
