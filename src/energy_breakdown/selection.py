"""Bounded, ordered selection of configuration columns.

The selection keeps user interaction order and never holds more than
``limit`` columns. Adding past the limit is rejected silently (the mutation
returns ``False``); "select all" truncates to the first ``limit`` available
columns instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from .constants import MAX_SELECTION

LOGGER = logging.getLogger("energy_breakdown.selection")

SelectionListener = Callable[[tuple[str, ...]], None]


class SelectionState:
    def __init__(
        self,
        available: Iterable[str] = (),
        *,
        limit: int = MAX_SELECTION,
        selected: Iterable[str] | None = None,
    ) -> None:
        if limit <= 0:
            raise ValueError("Selection limit must be positive.")
        self._limit = limit
        self._available: tuple[str, ...] = tuple(dict.fromkeys(available))
        self._selected: list[str] = []
        self._listeners: list[SelectionListener] = []
        if selected is not None:
            for column in selected:
                self._add(column)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def available(self) -> tuple[str, ...]:
        return self._available

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, column: object) -> bool:
        return column in self._selected

    @property
    def is_all_selected(self) -> bool:
        return bool(self._available) and len(self._selected) == len(self._available)

    @property
    def is_full(self) -> bool:
        return len(self._selected) >= self._limit

    def can_add(self, column: str) -> bool:
        return column in self._available and column not in self._selected and not self.is_full

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register ``listener`` for selection changes; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def reset(self, available: Sequence[str]) -> bool:
        """Replace the available columns and select them all (up to the limit)."""

        self._available = tuple(dict.fromkeys(available))
        return self._set(list(self._available[: self._limit]), force=True)

    def select_all(self) -> bool:
        if self.is_all_selected:
            return self._set([])
        return self._set(list(self._available[: self._limit]))

    def clear(self) -> bool:
        return self._set([])

    def toggle(self, column: str) -> bool:
        if column in self._selected:
            return self.remove(column)
        return self.add(column)

    def add(self, column: str) -> bool:
        if column not in self._available:
            LOGGER.warning("Ignoring unknown configuration '%s'", column)
            return False
        if column in self._selected:
            return False
        if self.is_full:
            LOGGER.debug("Selection full (%d); '%s' not added", self._limit, column)
            return False
        self._selected.append(column)
        self._notify()
        return True

    def remove(self, column: str) -> bool:
        if column not in self._selected:
            return False
        self._selected.remove(column)
        self._notify()
        return True

    def filter_available(self, query: str | None) -> list[str]:
        """Columns whose name contains ``query`` (case-insensitive); selection untouched."""

        needle = (query or "").strip().lower()
        if not needle:
            return list(self._available)
        return [column for column in self._available if needle in column.lower()]

    def _add(self, column: str) -> None:
        if column in self._available and column not in self._selected and not self.is_full:
            self._selected.append(column)

    def _set(self, columns: list[str], *, force: bool = False) -> bool:
        if columns == self._selected and not force:
            return False
        self._selected = columns
        self._notify()
        return True

    def _notify(self) -> None:
        snapshot = self.selected
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["SelectionListener", "SelectionState"]
