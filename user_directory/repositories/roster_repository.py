# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster data access.
In-memory mirror of the employees API, ordered, single owner.
"""

from typing import Optional

from user_directory.models.domain import UserId, UserRecord


def same_id(left: UserId, right: UserId) -> bool:
    """Ids arrive as ints from JSON and as strings from URLs."""
    return str(left) == str(right)


class RosterRepository:
    """In-memory roster storage."""

    def __init__(self) -> None:
        self._users: list[UserRecord] = []

    # ── Read ──

    def get_all(self) -> list[UserRecord]:
        return list(self._users)

    def get_by_id(self, user_id: UserId) -> Optional[UserRecord]:
        return next((u for u in self._users if same_id(u.id, user_id)), None)

    def count(self) -> int:
        return len(self._users)

    # ── Write ──

    def replace_all(self, users: list[UserRecord]) -> None:
        self._users = list(users)

    def append(self, user: UserRecord) -> None:
        self._users.append(user)

    def replace(self, user: UserRecord) -> bool:
        """Swap the record with the same id in place. False if absent."""
        for index, existing in enumerate(self._users):
            if same_id(existing.id, user.id):
                self._users[index] = user
                return True
        return False

    def delete(self, user_id: UserId) -> Optional[UserRecord]:
        removed = self.get_by_id(user_id)
        if removed is not None:
            self._users = [u for u in self._users if not same_id(u.id, user_id)]
        return removed
