from pathlib import Path

import config_paths
from config_paths import (
    CONFIG_ENV_VAR,
    CONFIG_ROOT_KEY,
    get_config_path,
    get_config_root,
    resolve_relative,
    set_config_root,
)

ROOT = Path(__file__).resolve().parents[1]


def test_get_config_path_defaults_to_repo_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert get_config_path() == (ROOT / "config.yaml").resolve()


def test_get_config_path_honours_environment_override(monkeypatch, tmp_path):
    override = tmp_path / "alt.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(override))

    assert get_config_path() == override.resolve()


def test_get_config_root_without_annotation_is_repo_root():
    assert get_config_root({}) == config_paths.REPO_ROOT.resolve()
    assert config_paths.REPO_ROOT.resolve() == ROOT


def test_resolve_relative_uses_annotated_root(tmp_path):
    section: dict[str, object] = {}
    set_config_root(section, tmp_path)

    assert section[CONFIG_ROOT_KEY] == str(tmp_path.resolve())
    assert resolve_relative("data/x.csv", section) == (tmp_path / "data" / "x.csv").resolve()
    assert resolve_relative("data/x.csv") == (ROOT / "data" / "x.csv").resolve()


def test_resolve_relative_keeps_absolute_paths(tmp_path):
    absolute = tmp_path / "elsewhere.csv"

    assert resolve_relative(absolute, {CONFIG_ROOT_KEY: "/ignored"}) == absolute
