# services/emissions/calculator.py
from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Optional

from models.emissions import (
    CalculationResult,
    CarbonCreditPolicy,
    EmissionTable,
    ModeEmission,
    PriceEstimate,
    SavingsResult,
)
from .factors import KG_CO2_PER_TREE_PER_YEAR


def _non_negative(value: Any) -> Optional[float]:
    """Return value as float if it is a finite real >= 0, else None."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return None
    return value


class EmissionCalculator:
    """
    Pure arithmetic over an emission table and a carbon-credit policy.

    Nothing here raises on bad numbers: negative, NaN, infinite or
    non-numeric input yields zero-valued output, so a caller rendering the
    result never sees NaN.
    """

    def __init__(self, table: EmissionTable, credit_policy: CarbonCreditPolicy):
        self.table = table
        self.credit_policy = credit_policy

    # ---------- modes ----------
    def is_valid_mode(self, mode_id: str) -> bool:
        return mode_id in self.table.modes

    def emission_factor(self, mode_id: str) -> float:
        return self.table.factor_for(mode_id)

    # ---------- emissions ----------
    def calculate_emission(self, mode_id: str, distance_km: Any) -> float:
        """distance (km) * factor (kg/km) -> kg CO2."""
        distance = _non_negative(distance_km)
        if distance is None:
            return 0.0
        return distance * self.emission_factor(mode_id)

    def calculate_all_modes(self, distance_km: Any) -> List[ModeEmission]:
        rows = [
            ModeEmission(
                mode_id=mode_id, emission_kg=self.calculate_emission(mode_id, distance_km)
            )
            for mode_id in self.table.modes
        ]
        # sorted() is stable: ties keep table order
        return sorted(rows, key=lambda r: r.emission_kg)

    def calculate_savings(self, mode_id: str, distance_km: Any) -> SavingsResult:
        reference = self.calculate_emission(self.table.reference_mode, distance_km)
        selected = self.calculate_emission(mode_id, distance_km)

        saved_kg = max(0.0, reference - selected)
        percentage = round(saved_kg / reference * 100, 1) if reference > 0 else 0.0
        return SavingsResult(saved_kg=saved_kg, percentage=percentage)

    # ---------- carbon credits ----------
    def calculate_carbon_credits(self, emission_kg: Any) -> float:
        kg = _non_negative(emission_kg)
        if kg is None:
            return 0.0
        return kg / self.credit_policy.kg_per_credit

    def estimate_credit_price(self, credits: Any) -> PriceEstimate:
        qty = _non_negative(credits)
        if qty is None:
            return PriceEstimate()
        lo = qty * self.credit_policy.price_min_per_credit
        hi = qty * self.credit_policy.price_max_per_credit
        return PriceEstimate(min=lo, max=hi, average=(lo + hi) / 2)

    def calculate_tree_equivalent(self, emission_kg: Any) -> int:
        kg = _non_negative(emission_kg)
        if kg is None:
            return 0
        return math.ceil(kg / KG_CO2_PER_TREE_PER_YEAR)

    # ---------- full pipeline ----------
    def calculate_trip(self, mode_id: str, distance_km: Any) -> CalculationResult:
        emission = self.calculate_emission(mode_id, distance_km)
        credits = self.calculate_carbon_credits(emission)
        return CalculationResult(
            mode=mode_id,
            distance_km=_non_negative(distance_km) or 0.0,
            emission_kg=emission,
            savings=self.calculate_savings(mode_id, distance_km),
            comparison=self.calculate_all_modes(distance_km),
            carbon_credits=credits,
            price_estimate=self.estimate_credit_price(credits),
            tree_equivalent=self.calculate_tree_equivalent(emission),
        )
