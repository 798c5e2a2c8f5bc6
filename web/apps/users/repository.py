"""Django ORM repository for users."""

from typing import List, Optional

from django.db import transaction

from apps.common.persistence import translate_db_errors

from .domain import UserRecord
from .models import UserModel


def _to_record(obj: UserModel) -> UserRecord:
    return {"id": obj.id, "email": obj.email, "name": obj.name}


class UserRepository:
    """Persists users with the Django ORM and returns flat ``UserRecord`` rows."""

    def find_many(self) -> List[UserRecord]:
        with translate_db_errors():
            return [_to_record(o) for o in UserModel.objects.all()]

    def find_unique_or_raise(self, user_id: int) -> UserRecord:
        with translate_db_errors(f"No User found with id {user_id}"):
            return _to_record(UserModel.objects.get(id=user_id))

    def create(self, email: str, name: Optional[str]) -> UserRecord:
        with translate_db_errors(), transaction.atomic():
            return _to_record(UserModel.objects.create(email=email, name=name))
