"""Pydantic schemas for the users API."""

from typing import Optional

from pydantic import EmailStr

from apps.common.schemas import CamelModel


class CreateUserDTO(CamelModel):
    """Payload for creating a user.

    Attributes:
        email: Required, must be a syntactically valid address.
        name: Optional display name.
    """

    email: EmailStr
    name: Optional[str] = None


class UserReadDTO(CamelModel):
    id: int
    email: str
    name: Optional[str] = None
