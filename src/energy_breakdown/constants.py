from __future__ import annotations

LABEL_COLUMN = "Unnamed: 0"

EMISSIONS_ROW = "Emissions Impact (right y-axis)"
TOTAL_ENERGY_ROW = "total energy"

ENERGY_COMPONENT_ORDER: tuple[str, ...] = (
    "Fuel Demand Process",
    "P-Process",
    "Fuel Demand boiler",
    "Fuel Demand (CC-CaL)",
    "P-MEA",
    "P-Heat Pumps",
    "P-CPU",
    "P-ASU",
    "Heat Recovered",
    "Power Recovered",
)

# Recovered quantities plot below zero even when stored as positive values.
FORCE_NEGATIVE_ROWS: frozenset[str] = frozenset({"Power Recovered", "Heat Recovered"})

COLOR_MAP: dict[str, str] = {
    "Fuel Demand Process": "#c12d2d",
    "Fuel Demand boiler": "#000000",
    "Fuel Demand (CC-CaL)": "#2f6e64",
    "P-MEA": "#d5d233",
    "P-Heat Pumps": "#44aa44",
    "P-CPU": "#1cf280",
    "P-ASU": "#5646ff",
    "Heat Recovered": "#8b81f9",
    "Power Recovered": "#bf5c5c",
    EMISSIONS_ROW: "#000000",
}
DEFAULT_COLOR = "#999999"

MAX_SELECTION = 32

STACK_ID = "energy"

FONT_SIZE = 14
FONT_FAMILY = "segoe ui, helvetica, arial, sans-serif"
AXIS_TITLE_FONT_FAMILY = "segoe ui semibold"
TEXT_COLOR = "#111"

ENERGY_UNIT = "GJ per tonne clinker"
EMISSIONS_UNIT = "tCO₂ per tonne clinker"

PRIMARY_AXIS: dict[str, object] = {
    "name": "Energy (Demand or Supply) - GJ/t clinker",
    "min": -3.0,
    "max": 9.0,
    "interval": 1.0,
}
SECONDARY_AXIS: dict[str, object] = {
    "name": "Total Emissions (Scope 1 & 2) - tCO₂/t clinker",
    "min": -0.3,
    "max": 0.9,
    "interval": 0.1,
}
