import io
from pathlib import Path

from energy_breakdown import ChartSession, build_chart_spec, load_table
from energy_breakdown.constants import EMISSIONS_ROW
from energy_breakdown.table_io import EnergyTable


def test_end_to_end_base_alt1(sample_csv: Path):
    table = load_table(sample_csv)

    spec = build_chart_spec(table, ["Base", "Alt1"])

    assert spec.categories == ("Base", "Alt1")
    assert spec.x_axis.rotation == 0
    assert [(bar.name, bar.values) for bar in spec.bar_series] == [
        ("Fuel Demand Process", (2.0, 3.0)),
        ("P-ASU", (1.0, 0.5)),
    ]
    (points,) = spec.scatter_series
    assert points.name == EMISSIONS_ROW
    assert points.values == (0.4, 0.35)


def test_session_load_selects_all_and_notifies(sample_csv: Path):
    session = ChartSession()
    seen = []
    session.subscribe(seen.append)

    spec = session.load(sample_csv)

    assert session.configurations == ("Base", "Alt1")
    assert spec.categories == ("Base", "Alt1")
    assert seen and seen[-1] is session.spec


def test_session_rebuilds_spec_on_selection_changes(sample_csv: Path):
    session = ChartSession()
    session.load(sample_csv)
    seen = []
    session.subscribe(seen.append)

    session.toggle("Base")
    assert session.spec.categories == ("Alt1",)
    assert session.spec.bar_series[0].values == (3.0,)

    session.toggle("Base")
    assert session.spec.categories == ("Alt1", "Base")
    assert session.spec.bar_series[0].values == (3.0, 2.0)

    session.clear()
    assert session.spec.series == ()
    assert session.spec.categories == ()

    session.select_all()
    assert session.spec.categories == ("Base", "Alt1")
    assert len(seen) == 4


def test_session_survives_load_failure(tmp_path: Path):
    session = ChartSession()

    spec = session.load(tmp_path / "missing.csv")

    assert session.configurations == ()
    assert spec.series == ()
    assert session.select_all() is False


def test_session_caps_selection_and_rotates_labels():
    columns = [f"C{i}" for i in range(40)]
    rows = [{"Unnamed: 0": "P-CPU", **{c: "0.1" for c in columns}}]
    session = ChartSession()

    spec = session.set_table(EnergyTable(rows=rows, columns=columns))

    assert len(spec.categories) == 32
    assert spec.x_axis.rotation == 89.5
    assert spec.grid.bottom == 50
    assert all(len(bar.values) == 32 for bar in spec.bar_series)


def test_offered_columns_do_not_touch_selection(sample_csv: Path):
    session = ChartSession()
    session.load(sample_csv)

    assert session.offered_columns("alt") == ["Alt1"]
    assert session.spec.categories == ("Base", "Alt1")


def test_build_chart_spec_is_idempotent(sample_csv: Path):
    table = load_table(sample_csv)
    assert build_chart_spec(table, ["Alt1"]) == build_chart_spec(table, ["Alt1"])


def test_repeated_label_plots_last_row_values():
    table = load_table(io.StringIO(",Base\nP-CPU,1\nP-CPU,9\n"))

    spec = build_chart_spec(table, ["Base"])

    assert [(bar.name, bar.values) for bar in spec.bar_series] == [("P-CPU", (9.0,))]
