from .chart_spec import ChartSpec, assemble
from .classifier import RowClassification, classify
from .coercion import coerce
from .layout import bottom_margin_for, layout_for, rotation_for
from .pipeline import ChartSession, build_chart_spec
from .profile import DEFAULT_PROFILE, ChartProfile, RowKind, load_profile
from .selection import SelectionState
from .series import SeriesBundle, StackedSeries, build_series
from .table_io import EnergyTable, load_table

__all__ = [
    "DEFAULT_PROFILE",
    "ChartProfile",
    "ChartSession",
    "ChartSpec",
    "EnergyTable",
    "RowClassification",
    "RowKind",
    "SelectionState",
    "SeriesBundle",
    "StackedSeries",
    "assemble",
    "bottom_margin_for",
    "build_chart_spec",
    "build_series",
    "classify",
    "coerce",
    "layout_for",
    "load_profile",
    "load_table",
    "rotation_for",
]
