"""Validation of raw customer arguments.

Decides whether a raw string is a contact or part of a name. Rejections
are reported as None rather than raised, so callers can route the value
elsewhere.
"""

import logging

from .models import MIN_CONTACT_LENGTH, InvalidArgumentError, NameParts
from .names import NameParser

logger = logging.getLogger(__name__)


class Validator:
    """Validates names and contacts used to create customers.

    Pure decision logic with no side effects.
    """

    def validate_contact(self, candidate: str | None) -> str | None:
        """Return the trimmed contact, or None if candidate is not a contact.

        Validity is purely syntactic: non-blank and at least 6 characters
        after trimming. No email or phone format checks are made.
        """
        if candidate is None or not candidate.strip():
            return None
        contact = NameParser.trim(candidate)
        if len(contact) < MIN_CONTACT_LENGTH:
            return None
        return contact

    def validate_name(self, name: str | None) -> NameParts | None:
        """Split name into parts, or return None if it is blank."""
        try:
            return NameParser.split(name)  # type: ignore[arg-type]
        except InvalidArgumentError as e:
            logger.debug(f"Rejected name {name!r}: {e}")
            return None
