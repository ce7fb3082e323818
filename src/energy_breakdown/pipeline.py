"""Compose the pipeline stages and drive them from selection changes.

``build_chart_spec`` is a pure function of the table, the selection and the
profile. ``ChartSession`` is the state-management layer: it owns the loaded
table and the :class:`SelectionState`, and rebuilds the whole spec after every
observed transition (data load or selection mutation).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .chart_spec import ChartSpec, assemble
from .classifier import RowClassification, classify
from .layout import layout_for
from .profile import DEFAULT_PROFILE, ChartProfile
from .selection import SelectionState
from .series import build_series
from .table_io import CsvSource, EnergyTable, load_table

LOGGER = logging.getLogger("energy_breakdown.pipeline")

SpecListener = Callable[[ChartSpec], None]


def build_chart_spec(
    table: EnergyTable,
    selection: Sequence[str],
    profile: ChartProfile = DEFAULT_PROFILE,
    classification: RowClassification | None = None,
) -> ChartSpec:
    rows = classification if classification is not None else classify(table, profile)
    bundle = build_series(
        rows.component_rows,
        rows.emissions_row,
        rows.row_lookup,
        selection,
        profile.force_negative_rows,
    )
    layout = layout_for(len(selection))
    return assemble(
        bundle.stacked,
        bundle.scatter,
        selection,
        layout.rotation,
        layout.bottom_margin,
        profile,
    )


class ChartSession:
    def __init__(self, profile: ChartProfile = DEFAULT_PROFILE) -> None:
        self.profile = profile
        self.table = EnergyTable(label_column=profile.label_column)
        self.classification = classify(self.table, profile)
        self.selection = SelectionState(limit=profile.max_selection)
        self._listeners: list[SpecListener] = []
        self._spec = build_chart_spec(self.table, (), profile, self.classification)
        self.selection.subscribe(self._on_selection_change)

    @property
    def spec(self) -> ChartSpec:
        return self._spec

    @property
    def configurations(self) -> tuple[str, ...]:
        return self.selection.available

    def subscribe(self, listener: SpecListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def load(self, source: CsvSource) -> ChartSpec:
        """Load ``source`` and select every configuration (up to the selection limit)."""

        return self.set_table(load_table(source, self.profile.label_column))

    def set_table(self, table: EnergyTable) -> ChartSpec:
        self.table = table
        self.classification = classify(table, self.profile)
        if len(table.columns) > self.selection.limit:
            LOGGER.info(
                "%d configurations available; selecting the first %d",
                len(table.columns),
                self.selection.limit,
            )
        # reset() always notifies, which triggers the rebuild below.
        self.selection.reset(table.columns)
        return self._spec

    def toggle(self, column: str) -> bool:
        return self.selection.toggle(column)

    def select_all(self) -> bool:
        return self.selection.select_all()

    def clear(self) -> bool:
        return self.selection.clear()

    def offered_columns(self, query: str | None = None) -> list[str]:
        return self.selection.filter_available(query)

    def _on_selection_change(self, selected: tuple[str, ...]) -> None:
        self._spec = build_chart_spec(self.table, selected, self.profile, self.classification)
        for listener in list(self._listeners):
            listener(self._spec)


__all__ = ["ChartSession", "SpecListener", "build_chart_spec"]
