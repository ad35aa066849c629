"""Core domain logic for the Clientele customer registry.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .factory import CustomerFactory
from .id_pool import IdPool
from .models import (
    Customer,
    IdPoolExhaustedError,
    InvalidArgumentError,
    NameParts,
)
from .names import NameParser
from .validator import Validator

__all__ = [
    "Customer",
    "CustomerFactory",
    "IdPool",
    "IdPoolExhaustedError",
    "InvalidArgumentError",
    "NameParser",
    "NameParts",
    "Validator",
]
