"""Shared dataclasses for the duplicate-application detector."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class ApplicationRecord:
    """One submitted application, as seen by the duplicate detector."""
    id: Any
    full_name: str = ""
    date_of_birth: str = ""
    phone: str = ""  # Display only, never matched on
    payload: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "ApplicationRecord":
        """Build a record from a raw application dict.

        The review screen nests applicant details under "user", and the
        backend sends the birth date as "data_of_birth". Both the nested and
        the flat shapes are accepted.
        """
        user = data.get("user") or {}
        if not isinstance(user, dict):
            user = {}

        full_name = user.get("full_name") or data.get("full_name") or ""
        dob = data.get("data_of_birth")
        if dob is None:
            dob = data.get("date_of_birth")
        phone = user.get("phone_number") or data.get("phone") or ""

        return cls(
            id=data.get("id"),
            full_name=str(full_name),
            date_of_birth=_birth_date_key(dob),
            phone=str(phone),
            payload=data,
        )


def _birth_date_key(value) -> str:
    """Exact-match bucket key for a birth date. Missing becomes ""."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return value if isinstance(value, str) else str(value)


def coerce_records(items) -> list[ApplicationRecord]:
    """Accept records or raw dicts. Anything that isn't a list/tuple is empty."""
    if not isinstance(items, (list, tuple)):
        return []
    return [
        item if isinstance(item, ApplicationRecord) else ApplicationRecord.from_dict(item)
        for item in items
    ]


@dataclass(frozen=True)
class DuplicateNotification:
    """Payload for the "duplicates found" badge."""
    has_duplicates: bool
    count: int

    def to_dict(self) -> dict:
        return {"has": self.has_duplicates, "count": self.count}


@dataclass
class DuplicateReport:
    """Result of one duplicate-detection run."""
    groups: list[list[ApplicationRecord]] = field(default_factory=list)
    duplicate_ids: set = field(default_factory=set)
    notification: DuplicateNotification = field(
        default_factory=lambda: DuplicateNotification(False, 0)
    )

    def is_duplicate(self, record) -> bool:
        """Accepts a record or a bare id."""
        key = record.id if isinstance(record, ApplicationRecord) else record
        return key in self.duplicate_ids
