"""Load the energy-breakdown CSV into a row-oriented table of strings.

Every cell is kept as text; numeric interpretation happens later in
``coercion``. A source that cannot be read is reported on the
``energy_breakdown.io`` logger and replaced by an empty table, so callers keep
running with an empty chart instead of failing.
"""

from __future__ import annotations

import io
import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Mapping, Union

import pandas as pd

from .constants import LABEL_COLUMN

LOGGER = logging.getLogger("energy_breakdown.io")

# str and Path are file paths; CSV text goes through io.StringIO.
CsvSource = Union[Path, str, bytes, IO[str], IO[bytes]]


@dataclass(slots=True)
class EnergyTable:
    """Rows keyed by column name, plus the configuration columns in header order."""

    rows: list[dict[str, str]] = field(default_factory=list)
    columns: list[str] = field(default_factory=list)
    label_column: str = LABEL_COLUMN

    @property
    def is_empty(self) -> bool:
        return not self.rows and not self.columns

    def label_of(self, row: Mapping[str, str]) -> str:
        return row.get(self.label_column) or ""


def table_from_frame(frame: pd.DataFrame, label_column: str = LABEL_COLUMN) -> EnergyTable:
    """Convert a string-typed DataFrame into an :class:`EnergyTable`."""

    fields = [str(col) for col in frame.columns]
    if not fields:
        return EnergyTable(label_column=label_column)
    if label_column not in fields:
        LOGGER.debug("Label column '%s' not found; using first column '%s'", label_column, fields[0])
        label_column = fields[0]
    frame = frame.copy()
    frame.columns = fields
    columns = [name for name in fields if name and name != label_column]
    rows = [
        {key: "" if pd.isna(value) else str(value) for key, value in record.items()}
        for record in frame.to_dict(orient="records")
    ]
    return EnergyTable(rows=rows, columns=columns, label_column=label_column)


def load_table(source: CsvSource, label_column: str = LABEL_COLUMN) -> EnergyTable:
    """Read ``source`` and return its table; failures yield an empty table.

    ``source`` is a file path (``str`` or :class:`~pathlib.Path`), raw CSV
    ``bytes``, or an open text/binary stream. Wrap CSV text in
    :class:`io.StringIO`; a plain string is always treated as a path.
    """

    origin = _describe(source)
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            # index_col=False keeps the first field as the label even when rows
            # carry more fields than the header.
            frame = pd.read_csv(
                _as_buffer(source),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
    except FileNotFoundError:
        LOGGER.error("CSV did not load: %s not found", origin)
        return EnergyTable(label_column=label_column)
    except pd.errors.EmptyDataError:
        LOGGER.error("CSV did not load: %s has no header row", origin)
        return EnergyTable(label_column=label_column)
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
        LOGGER.error("CSV parse error in %s: %s", origin, exc)
        return EnergyTable(label_column=label_column)

    for warning in caught:
        if issubclass(warning.category, pd.errors.ParserWarning):
            LOGGER.warning("CSV %s is malformed: %s", origin, warning.message)

    if not len(frame.columns):
        LOGGER.error("CSV did not load: %s has no recognizable header", origin)
        return EnergyTable(label_column=label_column)

    table = table_from_frame(frame, label_column)
    LOGGER.info(
        "Loaded %d rows and %d configurations from %s",
        len(table.rows),
        len(table.columns),
        origin,
    )
    return table


def _as_buffer(source: CsvSource):
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, str):
        return Path(source)
    return source


def _describe(source: CsvSource) -> str:
    if isinstance(source, bytes):
        return "<bytes>"
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


__all__ = ["CsvSource", "EnergyTable", "load_table", "table_from_frame"]
