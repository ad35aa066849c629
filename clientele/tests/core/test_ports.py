"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

import pytest

from clientele.core.models import Customer
from clientele.core.ports import CustomerFactoryPort, IdSourcePort


# ============================================================================
# IdSourcePort
# ============================================================================


class TestIdSourcePort:
    """Tests for the IdSourcePort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            IdSourcePort()  # type: ignore[abstract]

    def test_incomplete_implementation_fails(self) -> None:
        class Incomplete(IdSourcePort):
            pass

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]

    def test_complete_implementation(self) -> None:
        class Constant(IdSourcePort):
            def draw(self) -> int:
                return 7

        assert Constant().draw() == 7


# ============================================================================
# CustomerFactoryPort
# ============================================================================


class TestCustomerFactoryPort:
    """Tests for the CustomerFactoryPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            CustomerFactoryPort()  # type: ignore[abstract]

    def test_complete_implementation(self) -> None:
        class Named(CustomerFactoryPort):
            def create_customer(self, *args: str) -> Customer | None:
                return Customer(" ".join(args))

        customer = Named().create_customer("Eric", "Meyer")
        assert customer is not None
        assert customer.last_name == "Meyer"
