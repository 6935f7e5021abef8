# models/emissions.py
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class TransportMode(BaseModel):
    """One row of the emission table: factor (kg CO2 per km) + display metadata."""

    model_config = ConfigDict(frozen=True)

    id: str
    emission_factor_kg_per_km: float = Field(..., ge=0)
    label: str
    icon: str = ""
    color: str = "#6b7280"


class EmissionTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Insertion order is the tie-break order for comparisons
    modes: Dict[str, TransportMode]
    reference_mode: str = "car"

    @model_validator(mode="after")
    def _check_keys(self):
        for key, mode in self.modes.items():
            if key != mode.id:
                raise ValueError(f"mode key '{key}' does not match id '{mode.id}'")
        if self.reference_mode not in self.modes:
            raise ValueError(f"reference mode '{self.reference_mode}' is not configured")
        return self

    def factor_for(self, mode_id: str) -> float:
        mode = self.modes.get(mode_id)
        return float(mode.emission_factor_kg_per_km) if mode else 0.0


class CarbonCreditPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    kg_per_credit: float = Field(1000.0, gt=0)  # 1 credit = 1 t CO2
    price_min_per_credit: float = Field(50.0, ge=0)
    price_max_per_credit: float = Field(150.0, ge=0)
    currency: str = "BRL"

    @model_validator(mode="after")
    def _check_range(self):
        if self.price_max_per_credit < self.price_min_per_credit:
            raise ValueError("price_max_per_credit must be >= price_min_per_credit")
        return self


class ModeEmission(BaseModel):
    mode_id: str
    emission_kg: float


class SavingsResult(BaseModel):
    saved_kg: float = 0.0
    percentage: float = 0.0


class PriceEstimate(BaseModel):
    min: float = 0.0
    max: float = 0.0
    average: float = 0.0


class CalculationResult(BaseModel):
    mode: str
    distance_km: float
    emission_kg: float
    savings: SavingsResult
    comparison: List[ModeEmission]
    carbon_credits: float
    price_estimate: PriceEstimate
    tree_equivalent: int


class EmissionsRequest(BaseModel):
    mode: str
    distance_km: float = Field(..., gt=0)
    origin: Optional[str] = None
    destination: Optional[str] = None
