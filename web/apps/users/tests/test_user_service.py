"""Unit tests for ``UserService`` using the in-memory repository."""

import pytest

from apps.common.errors import PersistenceError
from apps.users.adapters import InMemoryUserRepository
from apps.users.domain import NewUser, User, UserId, UserMail, UserName, UserService


def make_service():
    return UserService(InMemoryUserRepository())


def test_create_and_find_user():
    service = make_service()
    created = service.create_user(NewUser(email=UserMail("ada@example.com"), name=UserName("Ada")))
    assert isinstance(created, User)
    assert service.find_by_id(created.id) == created
    assert service.find_users() == [created]


def test_create_user_without_name():
    service = make_service()
    created = service.create_user(NewUser(email=UserMail("anon@example.com")))
    assert created.name is None


def test_find_missing_user_raises_record_not_found():
    with pytest.raises(PersistenceError) as e:
        make_service().find_by_id(UserId(42))
    assert e.value.code == "P2025"


def test_duplicate_email_raises_unique_violation():
    service = make_service()
    service.create_user(NewUser(email=UserMail("ada@example.com")))
    with pytest.raises(PersistenceError) as e:
        service.create_user(NewUser(email=UserMail("ada@example.com")))
    assert e.value.code == "P2002"
