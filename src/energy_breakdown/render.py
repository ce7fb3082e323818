"""Draw a :class:`ChartSpec` with matplotlib.

Each call builds a new figure from the full spec; nothing is patched in place.
Positive bar segments stack upward from zero and negative segments (recovered
heat/power) stack downward, matching how stacked bars render in the browser
chart. Values beyond the fixed axis ranges are clipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from .chart_spec import SPLIT_LINE_COLOR, ChartSpec, TextStyle, ValueAxis

LOGGER = logging.getLogger("energy_breakdown.render")

DEFAULT_WIDTH_PX = 1000
DEFAULT_HEIGHT_PX = 625
DEFAULT_DPI = 100
MAX_BAR_FRACTION = 0.8


def render_chart(
    spec: ChartSpec,
    out_path: Path | str | None = None,
    *,
    width_px: int = DEFAULT_WIDTH_PX,
    height_px: int = DEFAULT_HEIGHT_PX,
    dpi: int = DEFAULT_DPI,
):
    """Render ``spec`` into a new figure and optionally save it to ``out_path``."""

    fig, ax = plt.subplots(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
    fig.patch.set_facecolor(spec.background_color)
    ax.set_facecolor(spec.background_color)
    secondary_ax = ax.twinx()

    categories = list(spec.categories)
    x = np.arange(len(categories))
    width = _bar_width(spec, len(categories), width_px)

    pos_base = np.zeros(len(categories))
    neg_base = np.zeros(len(categories))
    for bar in spec.bar_series:
        values = np.asarray(bar.values, dtype=float)
        bottom = np.where(values >= 0, pos_base, neg_base)
        ax.bar(x, values, width, bottom=bottom, color=bar.color, label=bar.name, zorder=2)
        pos_base = pos_base + np.clip(values, 0.0, None)
        neg_base = neg_base + np.clip(values, None, 0.0)

    for points in spec.scatter_series:
        marker_pt = points.symbol_size * 72.0 / dpi
        secondary_ax.scatter(
            x,
            np.asarray(points.values, dtype=float),
            s=marker_pt**2,
            marker="o",
            color=points.color,
            label=points.name,
            zorder=points.z,
        )

    primary, secondary = spec.y_axes
    _apply_value_axis(ax, primary)
    _apply_value_axis(secondary_ax, secondary)

    ax.set_xlim(-0.5, max(len(categories), 1) - 0.5)
    ax.set_xticks(x)
    rotation = spec.x_axis.rotation
    ax.set_xticklabels(
        categories,
        rotation=rotation,
        ha="right" if rotation else "center",
        rotation_mode="anchor",
    )
    _style_labels(ax.get_xticklabels(), spec.x_axis.label_style)
    ax.tick_params(axis="x", pad=spec.x_axis.label_margin * 72.0 / dpi)

    handles, labels = ax.get_legend_handles_labels()
    more_handles, more_labels = secondary_ax.get_legend_handles_labels()
    handles += more_handles
    labels += more_labels
    if handles:
        fig.legend(
            handles,
            labels,
            loc="upper center",
            bbox_to_anchor=(0.5, 1 - spec.legend.top / height_px),
            ncol=min(len(handles), 4),
            frameon=False,
            prop={"family": _families(spec.legend.text_style), "size": spec.legend.text_style.font_size},
            labelcolor=spec.legend.text_style.color,
        )

    grid = spec.grid
    fig.subplots_adjust(
        left=grid.left / width_px,
        right=1 - grid.right / width_px,
        top=1 - grid.top / height_px,
        bottom=grid.bottom / height_px,
    )

    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        # Labels may extend past the grid; keep them inside the saved image.
        fig.savefig(out_path, dpi=dpi, facecolor=spec.background_color, bbox_inches="tight")
        LOGGER.info("Saved chart to %s", out_path)
    return fig


def _bar_width(spec: ChartSpec, count: int, width_px: int) -> float:
    if count == 0 or not spec.bar_series:
        return MAX_BAR_FRACTION
    plot_px = max(width_px - spec.grid.left - spec.grid.right, 1)
    max_px = spec.bar_series[0].bar_max_width
    return min(MAX_BAR_FRACTION, max_px / (plot_px / count))


def _apply_value_axis(ax, axis: ValueAxis) -> None:
    ax.set_ylim(axis.min, axis.max)
    ax.set_yticks(axis.ticks())
    ax.set_ylabel(
        axis.name,
        rotation=axis.name_rotate,
        labelpad=axis.name_gap / 4,
        fontsize=axis.title_style.font_size,
        fontfamily=_families(axis.title_style),
        color=axis.title_style.color,
        va="bottom" if axis.name_rotate > 0 else "top",
    )
    _style_labels(ax.get_yticklabels(), axis.label_style)
    if axis.split_lines:
        ax.yaxis.grid(True, color=SPLIT_LINE_COLOR, zorder=0)
        ax.set_axisbelow(True)
    else:
        ax.grid(False)


def _style_labels(labels, style: TextStyle) -> None:
    for label in labels:
        label.set_fontsize(style.font_size)
        label.set_fontfamily(_families(style))
        label.set_color(style.color)


def _families(style: TextStyle) -> list[str]:
    return [name.strip() for name in style.font_family.split(",") if name.strip()]


__all__ = ["render_chart"]
