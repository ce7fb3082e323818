"""Render the energy-breakdown chart from a CSV file.

The selection starts with every configuration (capped at the selection limit)
or with none (``--start none``); ``--select-all``, ``--clear`` and repeated
``--toggle NAME`` flags are then applied in that order, mirroring the
dropdown actions of the interactive chart. ``--search`` lists the
configurations whose name contains the query without changing the selection.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

sys.path.insert(0, str(ROOT / "src"))

from config_paths import get_config_path  # noqa: E402
from energy_breakdown import ChartSession, load_profile  # noqa: E402
from energy_breakdown.profile import resolve_data_file  # noqa: E402
from energy_breakdown.render import render_chart  # noqa: E402

LOGGER = logging.getLogger("energy_breakdown.run")

DEFAULT_OUT = Path("plots/energy_breakdown.png")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot stacked energy components and emissions per configuration"
    )
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--csv", type=Path, help="CSV file (overrides energy_breakdown.data_file)")
    parser.add_argument(
        "--start",
        choices=("all", "none"),
        default="all",
        help="Initial selection after loading (default: all)",
    )
    parser.add_argument("--select-all", action="store_true", help="Apply the select-all toggle")
    parser.add_argument("--clear", action="store_true", help="Clear the selection")
    parser.add_argument(
        "--toggle",
        action="append",
        default=[],
        metavar="NAME",
        help="Toggle a configuration on/off; repeat to build the selection in order",
    )
    parser.add_argument("--search", help="List configurations containing this text")
    parser.add_argument("--out", "-o", type=Path, default=DEFAULT_OUT, help="Output image path")
    parser.add_argument("--spec-json", type=Path, help="Also write the chart spec as JSON")
    parser.add_argument("--no-plot", action="store_true", help="Skip image rendering")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")
    parser = _build_parser()
    args = parser.parse_args(argv)

    config_path = args.config if args.config is not None else get_config_path()
    profile = load_profile(config_path)
    csv_path = args.csv if args.csv is not None else resolve_data_file(config_path)
    if csv_path is None:
        parser.error("No CSV given: pass --csv or set energy_breakdown.data_file in the config.")

    session = ChartSession(profile)
    session.load(csv_path)

    if args.start == "none":
        session.clear()
    if args.select_all:
        session.select_all()
    if args.clear:
        session.clear()
    for name in args.toggle:
        if not session.toggle(name):
            LOGGER.warning(
                "Toggle of '%s' had no effect (unknown name or %d already selected)",
                name,
                profile.max_selection,
            )

    if args.search is not None:
        offered = session.offered_columns(args.search)
        LOGGER.info("Configurations matching '%s': %s", args.search, ", ".join(offered) or "none")

    spec = session.spec
    LOGGER.info(
        "Selected %d / %d configurations: %s",
        len(spec.categories),
        profile.max_selection,
        ", ".join(spec.categories) or "none",
    )

    if args.spec_json is not None:
        args.spec_json.parent.mkdir(parents=True, exist_ok=True)
        args.spec_json.write_text(
            json.dumps(spec.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        LOGGER.info("Chart spec written to %s", args.spec_json)

    if not args.no_plot:
        fig = render_chart(spec, args.out)
        plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
