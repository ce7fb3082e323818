"""Immutable chart configuration shared by every stage of the pipeline.

``DEFAULT_PROFILE`` reproduces the clinker energy-breakdown chart. Other
datasets reuse the same pipeline by loading a profile from the
``energy_breakdown`` section of a YAML configuration file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from . import constants

LOGGER = logging.getLogger("energy_breakdown.profile")

CONFIG_SECTION = "energy_breakdown"


class RowKind(Enum):
    """Role a labelled row plays in the chart."""

    TOTAL = "total"
    EMISSIONS = "emissions"
    COMPONENT = "component"
    EXTRA = "extra"


@dataclass(frozen=True, slots=True)
class AxisRange:
    """Fixed value-axis range; data outside it is clipped by the renderer."""

    name: str
    min: float
    max: float
    interval: float

    def __post_init__(self) -> None:
        if not self.min < self.max:
            raise ValueError(f"Axis '{self.name}' needs min < max (got {self.min}, {self.max}).")
        if self.interval <= 0:
            raise ValueError(f"Axis '{self.name}' interval must be positive.")


@dataclass(frozen=True, slots=True)
class ChartProfile:
    label_column: str = constants.LABEL_COLUMN
    total_row: str = constants.TOTAL_ENERGY_ROW
    emissions_row: str = constants.EMISSIONS_ROW
    component_order: tuple[str, ...] = constants.ENERGY_COMPONENT_ORDER
    colors: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(constants.COLOR_MAP))
    )
    default_color: str = constants.DEFAULT_COLOR
    force_negative_rows: frozenset[str] = constants.FORCE_NEGATIVE_ROWS
    max_selection: int = constants.MAX_SELECTION
    stack_id: str = constants.STACK_ID
    primary_axis: AxisRange = AxisRange(**constants.PRIMARY_AXIS)  # type: ignore[arg-type]
    secondary_axis: AxisRange = AxisRange(**constants.SECONDARY_AXIS)  # type: ignore[arg-type]
    font_size: int = constants.FONT_SIZE
    font_family: str = constants.FONT_FAMILY
    axis_title_font_family: str = constants.AXIS_TITLE_FONT_FAMILY
    text_color: str = constants.TEXT_COLOR
    energy_unit: str = constants.ENERGY_UNIT
    emissions_unit: str = constants.EMISSIONS_UNIT

    def color_for(self, row_name: str) -> str:
        return self.colors.get(row_name, self.default_color)

    def kind_of(self, row_name: str) -> RowKind:
        if row_name == self.total_row:
            return RowKind.TOTAL
        if row_name == self.emissions_row:
            return RowKind.EMISSIONS
        if row_name in self.component_order:
            return RowKind.COMPONENT
        return RowKind.EXTRA


DEFAULT_PROFILE = ChartProfile()


def read_config_section(config_path: Path | str) -> dict[str, Any]:
    """Return the ``energy_breakdown`` mapping from a YAML file (empty when absent)."""

    config_path = Path(config_path)
    with config_path.open(encoding="utf-8") as handle:
        config = yaml.safe_load(handle) or {}
    if not isinstance(config, Mapping):
        raise ValueError(f"{config_path} must contain a mapping at the top level.")
    section = config.get(CONFIG_SECTION) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{CONFIG_SECTION}' section in {config_path} must be a mapping.")
    return dict(section)


def profile_from_mapping(
    settings: Mapping[str, Any], base: ChartProfile = DEFAULT_PROFILE
) -> ChartProfile:
    """Overlay recognised keys of ``settings`` on ``base``."""

    overrides: dict[str, Any] = {}
    for key in (
        "label_column",
        "total_row",
        "emissions_row",
        "default_color",
        "stack_id",
        "font_family",
        "axis_title_font_family",
        "text_color",
        "energy_unit",
        "emissions_unit",
    ):
        if key in settings and settings[key] is not None:
            overrides[key] = str(settings[key])

    if settings.get("component_order") is not None:
        order = settings["component_order"]
        if not isinstance(order, (list, tuple)):
            raise ValueError("'component_order' must be a list of row labels.")
        overrides["component_order"] = tuple(dict.fromkeys(str(name) for name in order))

    if settings.get("colors") is not None:
        colors = settings["colors"]
        if not isinstance(colors, Mapping):
            raise ValueError("'colors' must map row labels to colours.")
        overrides["colors"] = MappingProxyType({str(k): str(v) for k, v in colors.items()})

    if settings.get("force_negative_rows") is not None:
        rows = settings["force_negative_rows"]
        if not isinstance(rows, (list, tuple, set)):
            raise ValueError("'force_negative_rows' must be a list of row labels.")
        overrides["force_negative_rows"] = frozenset(str(name) for name in rows)

    for key in ("max_selection", "font_size"):
        if settings.get(key) is not None:
            value = int(settings[key])
            if value <= 0:
                raise ValueError(f"'{key}' must be a positive integer.")
            overrides[key] = value

    for key in ("primary_axis", "secondary_axis"):
        if settings.get(key) is not None:
            overrides[key] = _axis_from_mapping(key, settings[key], getattr(base, key))

    return replace(base, **overrides)


def _axis_from_mapping(key: str, raw: Any, base: AxisRange) -> AxisRange:
    if not isinstance(raw, Mapping):
        raise ValueError(f"'{key}' must be a mapping with min/max/interval.")
    try:
        return AxisRange(
            name=str(raw.get("name", base.name)),
            min=float(raw.get("min", base.min)),
            max=float(raw.get("max", base.max)),
            interval=float(raw.get("interval", base.interval)),
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid '{key}' settings: {exc}") from exc


def load_profile(config_path: Path | str | None = None) -> ChartProfile:
    """Build a profile from ``config.yaml`` (or ``ENERGY_BREAKDOWN_CONFIG_PATH``)."""

    from config_paths import get_config_path  # local import keeps the package importable alone

    path = Path(config_path) if config_path is not None else get_config_path()
    section = read_config_section(path)
    if not section:
        LOGGER.info("No '%s' section in %s; using default profile", CONFIG_SECTION, path)
        return DEFAULT_PROFILE
    return profile_from_mapping(section)


def resolve_data_file(config_path: Path | str) -> Path | None:
    """Return the configured ``data_file`` resolved against the config directory."""

    from config_paths import resolve_relative, set_config_root

    config_path = Path(config_path)
    section = read_config_section(config_path)
    raw = section.get("data_file")
    if not raw:
        return None
    set_config_root(section, config_path.parent)
    return resolve_relative(str(raw), section)


__all__ = [
    "AxisRange",
    "ChartProfile",
    "DEFAULT_PROFILE",
    "RowKind",
    "load_profile",
    "profile_from_mapping",
    "read_config_section",
    "resolve_data_file",
]
