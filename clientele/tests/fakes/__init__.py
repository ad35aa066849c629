"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- SequenceIdSource: Replays a fixed list of candidate ids
- FakeCustomerFactoryPort: Canned factory results, captured calls
"""

from .factory import FakeCustomerFactoryPort
from .ids import SequenceIdSource

__all__ = [
    "FakeCustomerFactoryPort",
    "SequenceIdSource",
]
