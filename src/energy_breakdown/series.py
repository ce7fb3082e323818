from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from .coercion import coerce


@dataclass(frozen=True, slots=True)
class StackedSeries:
    name: str
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class SeriesBundle:
    """Stacked component series plus the emissions scatter, aligned to the selection."""

    stacked: tuple[StackedSeries, ...] = ()
    scatter: tuple[float, ...] = ()


def row_values(row: Mapping[str, str] | None, selection: Sequence[str]) -> np.ndarray:
    """Coerced values of ``row`` for each selected column; missing cells are 0."""

    if row is None:
        return np.zeros(len(selection), dtype=float)
    return np.array([coerce(row.get(column)) for column in selection], dtype=float)


def build_series(
    component_rows: Sequence[str],
    emissions_row: str,
    row_lookup: Mapping[str, Mapping[str, str]],
    selection: Sequence[str],
    sign_policy: Collection[str],
) -> SeriesBundle:
    stacked = []
    for name in component_rows:
        values = row_values(row_lookup.get(name), selection)
        if name in sign_policy:
            values = -np.abs(values)
        stacked.append(StackedSeries(name=name, values=_as_tuple(values)))
    scatter = row_values(row_lookup.get(emissions_row), selection)
    return SeriesBundle(stacked=tuple(stacked), scatter=_as_tuple(scatter))


def _as_tuple(values: np.ndarray) -> tuple[float, ...]:
    # -abs(0.0) is -0.0; report it as a plain zero.
    return tuple(float(v) + 0.0 for v in values)


__all__ = ["SeriesBundle", "StackedSeries", "build_series", "row_values"]
