"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from fintrack.domain.shared.time import utc_now
from fintrack_identity.domain.user.value_objects import Email


class User:
    """
    User aggregate root.

    Holds identity and display names. Ledger data references the user by
    ``id`` only.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._name = name
        self._first_name = first_name
        self._last_name = last_name
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def first_name(self) -> Optional[str]:
        return self._first_name

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    @property
    def display_name(self) -> str:
        full = " ".join(p for p in (self._first_name, self._last_name) if p)
        return full or self._name or self.email

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> None:
        """Update the given name fields; ``None`` leaves a field unchanged."""
        if name is not None:
            self._name = name
        if first_name is not None:
            self._first_name = first_name
        if last_name is not None:
            self._last_name = last_name
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> "User":
        return cls(
            email=email,
            name=name,
            first_name=first_name,
            last_name=last_name,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            first_name=first_name,
            last_name=last_name,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
