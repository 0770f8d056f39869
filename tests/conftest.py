from __future__ import annotations

from pathlib import Path

import pytest

from go_envdata.config import load_config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def environ_entries() -> list[str]:
    return (FIXTURES / "sample.environ").read_text(encoding="utf-8").splitlines()


@pytest.fixture()
def config_path() -> Path:
    return FIXTURES / "config_test.yml"


@pytest.fixture()
def config_dict(config_path: Path) -> dict:
    return load_config(config_path)
