"""Domain types, port and service for users.

Users are created once and only read afterwards. Lookups by id go through
the repository's throwing lookup, so a missing user surfaces as a
``PersistenceError`` (``P2025``) that the HTTP boundary classifies.
"""

from dataclasses import dataclass
from typing import List, NewType, Optional, Protocol, TypedDict


# ---- Branded primitives ----
UserId = NewType("UserId", int)
UserMail = NewType("UserMail", str)
UserName = NewType("UserName", str)


# ---- Records / Entities ----
class UserRecord(TypedDict):
    """Flat user row as returned by the persistence layer."""

    id: int
    email: str
    name: Optional[str]


@dataclass(frozen=True)
class NewUser:
    email: UserMail
    name: Optional[UserName] = None


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Persistent identifier.
        email: Unique e-mail address.
        name: Optional display name.
    """

    id: UserId
    email: UserMail
    name: Optional[UserName]


def map_user_record_to_domain(record: UserRecord) -> User:
    name = record.get("name")
    return User(
        id=UserId(record["id"]),
        email=UserMail(record["email"]),
        name=UserName(name) if name is not None else None,
    )


# ---- Ports (DIP) ----
class UserRepositoryPort(Protocol):
    """Persistence operations the user service relies on."""

    def find_many(self) -> List[UserRecord]:
        raise NotImplementedError()

    def find_unique_or_raise(self, user_id: int) -> UserRecord:
        """Return the user row or raise ``PersistenceError`` with code ``P2025``."""
        raise NotImplementedError()

    def create(self, email: str, name: Optional[str]) -> UserRecord:
        raise NotImplementedError()


# ---- Domain service ----
class UserService:
    """Read and create users through a ``UserRepositoryPort``."""

    def __init__(self, repository: UserRepositoryPort):
        self.repository = repository

    def find_users(self) -> List[User]:
        return [map_user_record_to_domain(r) for r in self.repository.find_many()]

    def find_by_id(self, user_id: UserId) -> User:
        """Return the user with ``user_id``.

        Raises:
            PersistenceError: With code ``P2025`` when no such user exists.
        """
        return map_user_record_to_domain(self.repository.find_unique_or_raise(user_id))

    def create_user(self, new_user: NewUser) -> User:
        """Persist a new user and return it.

        Raises:
            PersistenceError: ``P2002`` when the e-mail is already taken.
        """
        record = self.repository.create(email=new_user.email, name=new_user.name)
        return map_user_record_to_domain(record)
