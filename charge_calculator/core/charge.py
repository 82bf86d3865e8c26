"""
Monthly charge calculation.

Combines a customer's per-unit base rate with a provider's flat
connection charge.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Customer:
    """Customer billing terms."""
    base_rate: float  # Price per unit of usage


@dataclass(frozen=True)
class Provider:
    """Provider billing terms."""
    connection_charge: float  # Flat fee per billing period


def base_charge(customer: Any, usage: float) -> float:
    """Usage-dependent part of the charge: base_rate * usage."""
    return customer.base_rate * usage


def charge(customer: Any, usage: float, provider: Any) -> float:
    """Calculate the charge for a period of usage.

    Inputs are not validated; values follow plain Python arithmetic,
    so NaN propagates and non-numeric values raise from the operator.

    Args:
        customer: Object exposing ``base_rate``
        usage: Consumption units for the period
        provider: Object exposing ``connection_charge``

    Returns:
        base_rate * usage + connection_charge
    """
    total = base_charge(customer, usage) + provider.connection_charge
    logger.debug(
        "charge: base_rate=%r usage=%r connection_charge=%r -> %r",
        customer.base_rate, usage, provider.connection_charge, total
    )
    return total


def calculate_month_charge(customer: Any, usage: float, provider: Any) -> float:
    """Calculate the charge of a full month."""
    month_charge = charge(customer, usage, provider)
    return month_charge


class ChargeCalculator:
    """Charge formula with optionally pre-bound inputs.

    Inputs given to the constructor are used whenever ``charge`` is
    called without them:

        ChargeCalculator(customer, 100, provider).charge()
        ChargeCalculator().charge(customer, 100, provider)
    """

    def __init__(
        self,
        customer: Any = None,
        usage: Optional[float] = None,
        provider: Any = None
    ):
        self.customer = customer
        self.usage = usage
        self.provider = provider

    def charge(
        self,
        customer: Any = None,
        usage: Optional[float] = None,
        provider: Any = None
    ) -> float:
        """Calculate the charge, falling back to bound inputs.

        Raises:
            TypeError: If an input was neither passed nor bound
        """
        customer = self._resolve("customer", customer)
        usage = self._resolve("usage", usage)
        provider = self._resolve("provider", provider)
        return charge(customer, usage, provider)

    def _resolve(self, name: str, value: Any) -> Any:
        if value is None:
            value = getattr(self, name)
        if value is None:
            raise TypeError(f"ChargeCalculator.charge() missing input: '{name}'")
        return value
