"""CLI command implementations for Clientele.

Provides human-initiated actions through command-line interface.

This adapter maps CLI commands (create, split, contact) to core
operations. It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from clientele.core.models import Customer, NameParts
from clientele.core.names import NameParser
from clientele.core.ports import CustomerFactoryPort
from clientele.core.validator import Validator

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to CustomerFactoryPort.

    Provides a command-line interface for creating customers and for
    checking how names and contacts will be interpreted.
    """

    def __init__(
        self, factory: CustomerFactoryPort, validator: Validator | None = None
    ):
        """Initialize the CLI command handler.

        Args:
            factory: CustomerFactoryPort implementation to create customers.
            validator: Validator used by the contact command.
        """
        self.factory = factory
        self.validator = validator or Validator()

    def create_customer(
        self, args: list[str], format: str = "json", verbose: bool = False
    ) -> dict[str, Any]:
        """Create a customer from raw name parts and contacts.

        Args:
            args: Raw arguments, e.g. ["Eric", "Meyer", "eric98@yahoo.com"].
            format: Output format ('json', 'text'). Default 'json'.
            verbose: If True, log the created customer.

        Returns:
            Dictionary with status and customer data or message.
        """
        if format not in ("json", "text"):
            return {
                "status": "error",
                "operation": "create",
                "message": f"Unsupported format: {format}",
            }

        customer = self.factory.create_customer(*args)
        if customer is None:
            logger.error(f"Failed to create customer from {args!r}: name is blank")
            return {
                "status": "error",
                "operation": "create",
                "message": "no customer created: name empty",
            }

        if verbose:
            logger.info(
                f"Created customer {customer.id}",
                extra={"verbose": True},
            )

        return {
            "status": "success",
            "operation": "create",
            "data": (
                customer.to_dict()
                if format == "json"
                else self._format_customer_as_text(customer)
            ),
        }

    def split_name(self, name: str) -> dict[str, Any]:
        """Show how a single-string name splits into first and last name.

        Args:
            name: Single-string name, e.g. "Meyer, Anne".

        Returns:
            Dictionary with status and name parts or message.
        """
        try:
            parts = NameParser.split(name)
        except ValueError as e:
            logger.error(f"Failed to split name: {e}")
            return {
                "status": "error",
                "operation": "split",
                "message": str(e),
            }
        return {
            "status": "success",
            "operation": "split",
            "data": self._parts_to_dict(parts),
        }

    def validate_contact(self, value: str) -> dict[str, Any]:
        """Check whether a value would be accepted as a contact.

        Args:
            value: Candidate contact string.

        Returns:
            Dictionary with status and the trimmed contact or message.
        """
        contact = self.validator.validate_contact(value)
        if contact is None:
            return {
                "status": "error",
                "operation": "contact",
                "message": f"not a valid contact: {value!r}",
            }
        return {
            "status": "success",
            "operation": "contact",
            "data": contact,
        }

    @staticmethod
    def _parts_to_dict(parts: NameParts) -> dict[str, str]:
        return {"first_name": parts.first_name, "last_name": parts.last_name}

    @staticmethod
    def _format_customer_as_text(customer: Customer) -> str:
        """Format a customer as human-readable text.

        Args:
            customer: Customer to format.

        Returns:
            Formatted text string.
        """
        lines = [
            f"Customer ID: {customer.id}",
            f"First Name: {customer.first_name}",
            f"Last Name: {customer.last_name}",
            f"Contacts ({customer.contacts_count()}):",
        ]
        lines.extend(f"  - {contact}" for contact in customer.contacts)
        return "\n".join(lines)
