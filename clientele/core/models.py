"""Domain models for the Clientele customer registry.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from typing import Any

from .errors import IdPoolExhaustedError, InvalidArgumentError
from .names import NameParser, NameParts

MIN_CONTACT_LENGTH = 6

__all__ = [
    "MIN_CONTACT_LENGTH",
    "Customer",
    "IdPoolExhaustedError",
    "InvalidArgumentError",
    "NameParts",
]


class Customer:
    """A person who creates and holds orders in the system.

    Setters return the instance so calls can be chained:

        Customer().set_id(648).set_name("Eric", "Meyer").add_contact("eric@gmail.com")

    Invariants:
        - id is None until assigned, and immutable after the first
          assignment of a positive value
        - first_name and last_name are never None
        - contacts are trimmed, unique and at least 6 characters long
    """

    def __init__(self, name: str | None = None):
        """Create an empty customer, or one named from a single string.

        Args:
            name: Optional single-string name, e.g. "Eric Meyer" or
                "Meyer, Eric". See NameParser.split for the rules.

        Raises:
            InvalidArgumentError: If name is given but blank.
        """
        self._id: int | None = None
        self._first_name = ""
        self._last_name = ""
        self._contacts: list[str] = []
        if name is not None:
            self.set_full_name(name)

    def __repr__(self) -> str:
        return (
            f"Customer(id={self._id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, contacts={self._contacts!r})"
        )

    @property
    def id(self) -> int | None:
        """Assigned id, or None while unassigned."""
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def contacts(self) -> tuple[str, ...]:
        """Snapshot of contacts in insertion order."""
        return tuple(self._contacts)

    def set_id(self, id: int | None) -> "Customer":
        """Assign the id once.

        Negative ids are always rejected, even after an id was assigned.
        None, zero, and any call after the first assignment are ignored.

        Raises:
            InvalidArgumentError: If id is negative.
        """
        if id is not None and id < 0:
            raise InvalidArgumentError("invalid id (negative)")
        if self._id is None and id is not None and id > 0:
            self._id = id
        return self

    def set_name(self, first: str | None, last: str) -> "Customer":
        """Assign first and last name verbatim, without splitting.

        Raises:
            InvalidArgumentError: If last is None or blank.
        """
        if last is None or not last.strip():
            raise InvalidArgumentError("last name empty")
        self._first_name = first if first is not None else ""
        self._last_name = last
        return self

    def set_full_name(self, name: str) -> "Customer":
        """Split a single-string name and assign both parts.

        Raises:
            InvalidArgumentError: If name is None or blank.
        """
        parts = NameParser.split(name)
        self._first_name = parts.first_name
        self._last_name = parts.last_name
        return self

    def contacts_count(self) -> int:
        return len(self._contacts)

    def add_contact(self, contact: str) -> "Customer":
        """Add a contact such as an email address or phone number.

        The contact is trimmed before it is stored. Adding a contact that
        is already present has no effect.

        Raises:
            InvalidArgumentError: If contact is None, blank, or shorter
                than 6 characters after trimming.
        """
        if contact is None or not contact.strip():
            raise InvalidArgumentError("contact argument is null or empty")
        trimmed = NameParser.trim(contact)
        if len(trimmed) < MIN_CONTACT_LENGTH:
            raise InvalidArgumentError(
                f'contact less than {MIN_CONTACT_LENGTH} characters: "{contact}".'
            )
        if trimmed in self._contacts:
            return self
        self._contacts.append(trimmed)
        return self

    def delete_contact(self, index: int) -> None:
        """Delete the contact at index if 0 <= index < contacts_count()."""
        if 0 <= index < len(self._contacts):
            del self._contacts[index]

    def delete_all_contacts(self) -> None:
        self._contacts.clear()

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view, suitable for JSON output."""
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "contacts": list(self._contacts),
        }
