"""In-process stub adapter for ``UserRepositoryPort``.

Keeps rows in a dict and mimics the persistence error codes of the ORM
repository, so services can be unit tested without a database.
"""

from typing import Dict, List, Optional

from apps.common.errors import PersistenceError

from .domain import UserRecord, UserRepositoryPort


class InMemoryUserRepository(UserRepositoryPort):
    def __init__(self):
        self._rows: Dict[int, UserRecord] = {}
        self._next_id = 1

    def find_many(self) -> List[UserRecord]:
        return [dict(r) for r in self._rows.values()]

    def find_unique_or_raise(self, user_id: int) -> UserRecord:
        if user_id not in self._rows:
            raise PersistenceError("P2025", f"No User found with id {user_id}")
        return dict(self._rows[user_id])

    def create(self, email: str, name: Optional[str]) -> UserRecord:
        if any(r["email"] == email for r in self._rows.values()):
            raise PersistenceError("P2002", "Unique constraint failed on the fields: (`email`)")
        row: UserRecord = {"id": self._next_id, "email": email, "name": name}
        self._rows[row["id"]] = row
        self._next_id += 1
        return dict(row)
