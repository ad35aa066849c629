"""Name splitting rules for single-string customer names.

This module provides the algorithm that turns a free-form name such as
"Tim Anton Schulz-Müller" or "Schulz-Müller, Tim Anton" into first and
last name parts.
"""

import re
from dataclasses import dataclass

from .errors import InvalidArgumentError

_LEADING = re.compile(r"^[\s\"',;]+")
_TRAILING = re.compile(r"[\s\"',;]+$")
_WHITESPACE = re.compile(r"\s+")
_SEPARATOR = re.compile(r"[,;]")


@dataclass(frozen=True)
class NameParts:
    """First and last name produced by splitting a single-string name."""

    first_name: str
    last_name: str


class NameParser:
    """Splits single-string names into first and last name parts.

    Pure functions over strings, no external dependencies.
    All methods are static as the class carries no state.
    """

    @staticmethod
    def trim(value: str) -> str:
        """Strip leading and trailing whitespace, commas, semicolons and quotes.

        Shared by names and contacts.

        Examples:
        "  'Eric Meyer'  " → "Eric Meyer"
        ",; eric@gmail.com ;" → "eric@gmail.com"
        """
        value = _LEADING.sub("", value)
        return _TRAILING.sub("", value)

    @staticmethod
    def collapse(value: str) -> str:
        """Trim and reduce interior whitespace runs to a single space."""
        return _WHITESPACE.sub(" ", NameParser.trim(value))

    @staticmethod
    def split(name: str) -> NameParts:
        """Split a single-string name into first and last name.

        Rules:
        - names with a separator (comma or semicolon) split at the first
          separator: the part before is the last name, the part after is
          the first name, e.g. "Schulz-Müller, Tim Anton"
        - names without a separator: the last whitespace-delimited token is
          the last name, all prior tokens form the first name, e.g.
          "Tim Anton Schulz-Müller". A single token is a last name only.
        - hyphenated tokens are never split

        Examples:
        "Eric Meyer"                    → ("Eric", "Meyer")
        "Meyer; Anne"                   → ("Anne", "Meyer")
        "Nadine     Ulla   Blumenfeld"  → ("Nadine Ulla", "Blumenfeld")
        "  'Schulz-Müller, Tim Anton' " → ("Tim Anton", "Schulz-Müller")

        Raises:
            InvalidArgumentError: If name is None or blank after trimming.
        """
        if name is None:
            raise InvalidArgumentError("name empty")
        name = NameParser.trim(name)
        if not name:
            raise InvalidArgumentError("name empty")

        if _SEPARATOR.search(name):
            last, first = _SEPARATOR.split(name, maxsplit=1)
            return NameParts(
                first_name=NameParser.collapse(first),
                last_name=NameParser.collapse(last),
            )

        tokens = _WHITESPACE.split(name)
        return NameParts(first_name=" ".join(tokens[:-1]), last_name=tokens[-1])
