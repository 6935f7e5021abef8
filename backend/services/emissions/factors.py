# services/emissions/factors.py
from __future__ import annotations

from models.emissions import CarbonCreditPolicy, EmissionTable, TransportMode

# Average annual CO2 absorption of one tree, in kg
KG_CO2_PER_TREE_PER_YEAR = 22

_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round">{}</svg>'
)

_ICON_BICYCLE = _SVG.format(
    '<path d="M5.5 17a2.5 2.5 0 1 0 0-5 2.5 2.5 0 0 0 0 5zm13 0a2.5 2.5 0 1 0 0-5 '
    '2.5 2.5 0 0 0 0 5z"/><circle cx="15" cy="5" r="1"/><path d="M12 17.5V14l-3-3 4-3 2 3h2"/>'
)
_ICON_VEHICLE = _SVG.format(
    '<rect x="1" y="3" width="15" height="13"/><polygon points="16 8 20 8 23 11 23 16 16 16 16 8"/>'
    '<circle cx="5.5" cy="18.5" r="2.5"/><circle cx="18.5" cy="18.5" r="2.5"/>'
)
_ICON_BUS = _SVG.format(
    '<path d="M8 6v6"/><path d="M15 6v6"/><path d="M2 12h19.6"/>'
    '<path d="M18 18h3s.5-1.7.8-2.8c.1-.4.2-.8.2-1.2 0-.4-.1-.8-.2-1.2l-1.4-5C20.1 6.8 19.1 6 '
    '18 6H4a2 2 0 0 0-2 2v10h3"/><circle cx="7" cy="18" r="2"/><path d="M9 18h5"/>'
    '<circle cx="16" cy="18" r="2"/>'
)


def default_table() -> EmissionTable:
    """
    Average per-km factors (kg CO2/km):
      bicycle 0     (active transport)
      car     0.12  (petrol, ~120 g/km)
      bus     0.089 (per passenger)
      truck   0.96
    """
    modes = [
        TransportMode(
            id="bicycle",
            emission_factor_kg_per_km=0.0,
            label="Bicicleta",
            icon=_ICON_BICYCLE,
            color="#10b981",
        ),
        TransportMode(
            id="car",
            emission_factor_kg_per_km=0.12,
            label="Carro",
            icon=_ICON_VEHICLE,
            color="#3b82f6",
        ),
        TransportMode(
            id="bus",
            emission_factor_kg_per_km=0.089,
            label="Ônibus",
            icon=_ICON_BUS,
            color="#f59e0b",
        ),
        TransportMode(
            id="truck",
            emission_factor_kg_per_km=0.96,
            label="Caminhão",
            icon=_ICON_VEHICLE,
            color="#ef4444",
        ),
    ]
    return EmissionTable(modes={m.id: m for m in modes}, reference_mode="car")


def default_credit_policy() -> CarbonCreditPolicy:
    return CarbonCreditPolicy(
        kg_per_credit=1000.0,
        price_min_per_credit=50.0,
        price_max_per_credit=150.0,
        currency="BRL",
    )
