"""Tests for invite code generation."""

from little_fridge.services.invite_codes import (
    INVITE_CODE_ALPHABET,
    InviteCodeGenerator,
    normalize_code,
)


def test_generated_codes_use_unambiguous_alphabet() -> None:
    generator = InviteCodeGenerator()

    codes = [generator.generate() for _ in range(200)]

    for code in codes:
        assert len(code) == 6
        assert set(code) <= set(INVITE_CODE_ALPHABET)
    assert not set("".join(codes)) & {"0", "O", "1", "I"}


def test_generator_respects_configured_length() -> None:
    assert len(InviteCodeGenerator(length=8).generate()) == 8


def test_normalize_code_strips_and_uppercases() -> None:
    assert normalize_code("  k7p2qx ") == "K7P2QX"
