"""Wiring of ``UserService`` with its ORM repository."""

from .domain import UserService
from .repository import UserRepository


def get_user_service() -> UserService:
    return UserService(UserRepository())
