# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def write_csv(tmp_path: Path):
    """
    Factory fixture：写一个 CSV 文件并返回路径

    Usage:
        path = write_csv("x,y\\n1,2\\n")
    """

    def _write(text: str, name: str = "data.csv") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def linear_csv(write_csv) -> Path:
    return write_csv("x,y\n1,2\n2,4\n3,6\n")


@pytest.fixture
def write_config(tmp_path: Path):
    """
    Factory fixture for YAML config files (testing only).

    日志目录指向 tmp_path，避免污染工作目录。
    """

    def _write(data: dict | None = None, name: str = "config.yml") -> Path:
        raw = {"log": {"dir": str(tmp_path / "logs"), "level": "DEBUG"}}
        raw.update(data or {})
        p = tmp_path / name
        p.write_text(yaml.safe_dump(raw), encoding="utf-8")
        return p

    return _write
