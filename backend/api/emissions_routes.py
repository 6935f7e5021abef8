# api/emissions_routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from api._resp import ok
from models.emissions import EmissionsRequest
from services.emissions.calculator import EmissionCalculator
from services.emissions.emissions_factory import get_calculator

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.get("/modes")
def list_modes(calc: EmissionCalculator = Depends(get_calculator)):
    modes = [m.model_dump() for m in calc.table.modes.values()]
    return ok(
        modes,
        reference_mode=calc.table.reference_mode,
        credit_policy=calc.credit_policy.model_dump(),
    )


@router.post("/estimate")
def estimate_emissions(
    req: EmissionsRequest, calc: EmissionCalculator = Depends(get_calculator)
):
    if not calc.is_valid_mode(req.mode):
        raise HTTPException(400, f"Unknown transport mode '{req.mode}'")

    result = calc.calculate_trip(req.mode, req.distance_km)
    return ok(
        result.model_dump(),
        origin=req.origin,
        destination=req.destination,
        units="kgCO2",
    )


@router.get("/compare")
def compare_modes(
    distance_km: float = Query(..., gt=0),
    calc: EmissionCalculator = Depends(get_calculator),
):
    rows = calc.calculate_all_modes(distance_km)
    return ok([r.model_dump() for r in rows], distance_km=distance_km, units="kgCO2")
