"""Customer entity - a person who books appointments at the salon."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

from .dates import format_datetime, parse_datetime


Gender = Literal["male", "female", "other"]

PREFERENCE_KEYS = ("hairType", "allergyInfo", "skinType")


@dataclass
class Customer:
    """Identity and contact data. Visit statistics are derived, never stored."""

    id: str
    name: str
    phone: str
    kana: str = ""
    email: str = ""
    birthday: str = ""
    gender: Optional[Gender] = None
    address: str = ""
    memo: str = ""
    preferences: dict = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Creates a Customer from its stored JSON form.

        Stored documents written by older versions may still carry
        totals or favoriteServices; they are dropped here.
        """
        preferences = data.get("preferences") or {}
        return cls(
            id=str(data["id"]),
            name=data["name"],
            phone=data.get("phone", ""),
            kana=data.get("kana") or "",
            email=data.get("email") or "",
            birthday=data.get("birthday") or "",
            gender=data.get("gender") or None,
            address=data.get("address") or "",
            memo=data.get("memo") or "",
            preferences={k: v for k, v in preferences.items() if k in PREFERENCE_KEYS},
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_dict(self) -> dict:
        """Converts to the stored JSON form."""
        return {
            "id": self.id,
            "name": self.name,
            "kana": self.kana,
            "phone": self.phone,
            "email": self.email,
            "birthday": self.birthday,
            "gender": self.gender,
            "address": self.address,
            "memo": self.memo,
            "preferences": dict(self.preferences),
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    def matches(self, search: str) -> bool:
        """Case-insensitive match on name, kana and email; substring on phone."""
        needle = search.lower()
        return (
            needle in self.name.lower()
            or needle in self.kana.lower()
            or search in self.phone
            or (bool(self.email) and needle in self.email.lower())
        )
