"""Pydantic models for API request bodies."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SignUpRequest(BaseModel):
    """Account creation payload."""

    email: str | None = None
    password: str | None = None
    name: str | None = None


class SignInRequest(BaseModel):
    """Email and password sign-in payload."""

    email: str | None = None
    password: str | None = None


class CreateFridgeRequest(_CamelModel):
    """Fridge group creation payload."""

    group_name: str | None = Field(default=None, alias="groupName")


class JoinFridgeRequest(_CamelModel):
    """Invite code redemption payload."""

    invite_code: str | None = Field(default=None, alias="inviteCode")


class AddItemRequest(_CamelModel):
    """Single item insert payload.

    Attribution comes from the verified token; an ``addedByUserId`` field in
    the body is ignored.
    """

    food_name: str | None = Field(default=None, alias="foodName")
    quantity: int | None = None
    expires_at: datetime | None = Field(default=None, alias="expiresAt")


class AddItemsRequest(BaseModel):
    """Batch item insert payload."""

    items: list[AddItemRequest] = Field(default_factory=list)


class UpdateQuantityRequest(BaseModel):
    """Quantity update payload."""

    quantity: int | None = None
