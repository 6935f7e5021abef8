# services/emissions/emissions_factory.py
from __future__ import annotations
from functools import lru_cache

from .calculator import EmissionCalculator
from .factors import default_credit_policy, default_table


@lru_cache(maxsize=1)
def get_calculator() -> EmissionCalculator:
    """Return a cached calculator over the built-in table and credit policy."""
    return EmissionCalculator(default_table(), default_credit_policy())
