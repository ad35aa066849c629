"""Port interfaces for the Clientele customer registry.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - IdSourcePort: Draw candidate ids for the id pool

2. **Driving Ports** (adapters/external systems call into core)
   - CustomerFactoryPort: Entry point for creating customers
"""

from abc import ABC, abstractmethod

from .models import Customer


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class IdSourcePort(ABC):
    """Port for drawing candidate ids.

    Adapters implementing this port supply raw candidates, typically
    random numbers within a bounded range. Candidates may repeat; the
    id pool is responsible for rejecting collisions.

    Implementations should allow a fixed seed so that tests and
    reproducible runs produce the same sequence.
    """

    @abstractmethod
    def draw(self) -> int:
        """Return one positive candidate id."""


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class CustomerFactoryPort(ABC):
    """Port for creating customers from raw arguments.

    Driving port: the CLI invokes this to turn user input into
    validated Customer objects.

    Implementations live in the core.
    """

    @abstractmethod
    def create_customer(self, *args: str) -> Customer | None:
        """Create a customer from a mix of name parts and contacts.

        Args:
            *args: Raw strings. Each is either a contact (e.g.
                "eric98@yahoo.com") or a name part (e.g. "Eric").

        Returns:
            A Customer with an assigned id, or None if the arguments
            contain no usable name.
        """
