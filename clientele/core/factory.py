"""Customer creation from raw, unvalidated arguments.

This module implements the factory that separates contacts from name
parts, validates both, and assigns ids from the factory's own id pool.
"""

import logging

from .id_pool import IdPool
from .models import Customer
from .ports import CustomerFactoryPort
from .validator import Validator

logger = logging.getLogger(__name__)


class CustomerFactory(CustomerFactoryPort):
    """Creates customers only from valid names and contacts.

    Each factory owns its id pool, so ids never repeat among the
    customers created by one factory.
    """

    def __init__(self, id_pool: IdPool, validator: Validator | None = None):
        self.id_pool = id_pool
        self.validator = validator or Validator()

    def create_customer(self, *args: str) -> Customer | None:
        """Create a customer from a mix of name parts and contacts.

        Examples:
        - create_customer("Eric", "Meyer", "eric98@yahoo.com", "(030) 3945-642298")
        - create_customer("Bayer;", "Anne", "anne24@yahoo.de", "fax: (030)23451356")
        - create_customer(" Tim ", " Lutz ", "tim2346@gmx.de")

        Arguments that validate as contacts become contacts, everything
        else is joined into one name. Contact detection only looks at
        length, so a name part of 6 or more characters is taken as a
        contact. No id is drawn when the name is blank.
        """
        name_buffer: list[str] = []
        contacts: list[str] = []
        for arg in args:
            contact = self.validator.validate_contact(arg)
            if contact is None:
                name_buffer.append(f"{arg if arg is not None else ''} ")
            else:
                contacts.append(contact)

        flat_name = "".join(name_buffer)
        parts = self.validator.validate_name(flat_name)
        if parts is None:
            logger.debug(
                f"No customer created from {len(args)} arguments: name is blank"
            )
            return None

        customer = Customer().set_id(self.id_pool.next()).set_name(
            parts.first_name, parts.last_name
        )
        for contact in contacts:
            customer.add_contact(contact)

        logger.debug(
            f"Created customer {customer.id}: {customer.first_name} {customer.last_name}",
            extra={"contacts": customer.contacts_count()},
        )
        return customer
