from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from .profile import DEFAULT_PROFILE, ChartProfile, RowKind
from .table_io import EnergyTable

LOGGER = logging.getLogger("energy_breakdown.classifier")


@dataclass(slots=True)
class RowClassification:
    """Stack order, emissions label and row lookup derived from a table."""

    component_rows: list[str] = field(default_factory=list)
    emissions_row: str = DEFAULT_PROFILE.emissions_row
    row_lookup: dict[str, Mapping[str, str]] = field(default_factory=dict)
    row_kinds: dict[str, RowKind] = field(default_factory=dict)

    @property
    def extras(self) -> list[str]:
        return [name for name in self.component_rows if self.row_kinds.get(name) is RowKind.EXTRA]

    @property
    def has_emissions(self) -> bool:
        return self.emissions_row in self.row_lookup


def classify(table: EnergyTable, profile: ChartProfile = DEFAULT_PROFILE) -> RowClassification:
    """Split table rows into stacked components, the emissions row and the dropped total.

    Recognised components keep the profile's canonical order; unrecognised
    labels follow in first-seen order. The total and emissions rows never
    appear in ``component_rows``.
    """

    result = RowClassification(emissions_row=profile.emissions_row)
    labels: list[str] = []
    for row in table.rows:
        name = table.label_of(row)
        if not name:
            continue
        labels.append(name)
        # Later rows with a repeated label replace the earlier data.
        result.row_lookup[name] = row
        result.row_kinds.setdefault(name, profile.kind_of(name))

    if not labels:
        return result

    available = set(labels)
    reserved = {profile.total_row, profile.emissions_row}
    ordered = [name for name in profile.component_order if name in available]
    extras = [name for name in labels if name not in reserved and name not in ordered]

    result.component_rows = [
        name for name in dict.fromkeys(ordered + extras) if name not in reserved
    ]

    unrecognised = list(dict.fromkeys(extras))
    if unrecognised:
        LOGGER.warning(
            "Rows not in the component order are stacked after it: %s",
            ", ".join(unrecognised),
        )
    if profile.emissions_row not in available:
        LOGGER.warning("Emissions row '%s' missing; scatter values default to 0", profile.emissions_row)
    return result


__all__ = ["RowClassification", "classify"]
