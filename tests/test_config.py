from __future__ import annotations

from pathlib import Path

import pytest

from go_envdata.config import ALWAYS_IGNORE, Config, Mode, load_config, new_default_config, normalize_ignore


def test_default_config() -> None:
    cfg = new_default_config()
    assert cfg.package_name == "env"
    assert cfg.output_path is None
    assert cfg.ignore_list == ()
    assert cfg.mode is Mode.RELEASE
    assert not cfg.dev


def test_config_is_frozen() -> None:
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.package_name = "other"  # type: ignore[misc]


def test_always_ignore_includes_path() -> None:
    assert ALWAYS_IGNORE == {"PWD", "SHLVL", "_", "PATH"}


def test_load_config_without_file() -> None:
    assert load_config() == {"package": "env", "ignore": [], "log_level": "WARNING"}


def test_load_config_from_yaml(config_dict: dict) -> None:
    assert config_dict["package"] == "envdefaults"
    assert config_dict["ignore"] == ["SECRET_TOKEN", "HOME"]
    assert config_dict["log_level"] == "info"


def test_load_config_accepts_ignore_list(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text("ignore:\n  - FOO\n  - BAR BAZ\n", encoding="utf-8")
    assert load_config(path)["ignore"] == ["FOO", "BAR", "BAZ"]


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path)["package"] == "env"


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "must contain a mapping"),
        ("pkg: main\n", "unknown keys"),
        ("package: [unclosed\n", "invalid config file"),
        ("ignore: 3\n", "ignore must be"),
    ],
)
def test_load_config_rejects_bad_files(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_normalize_ignore() -> None:
    assert normalize_ignore(None) == ()
    assert normalize_ignore("  FOO\tBAR\nBAZ ") == ("FOO", "BAR", "BAZ")
    assert normalize_ignore(["FOO", "BAR BAZ"]) == ("FOO", "BAR", "BAZ")
    with pytest.raises(ValueError):
        normalize_ignore([1])
