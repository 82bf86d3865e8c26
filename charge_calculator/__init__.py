"""
Charge Calculator - monthly charge from base rate, usage and connection charge.
"""

from .core.charge import (
    ChargeCalculator,
    Customer,
    Provider,
    base_charge,
    calculate_month_charge,
    charge,
)

__all__ = [
    "ChargeCalculator",
    "Customer",
    "Provider",
    "base_charge",
    "calculate_month_charge",
    "charge",
]
