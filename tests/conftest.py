import sys
from pathlib import Path

# Ensure the src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


import logging

import pytest

from flowlog_tagger.classify import Classifier
from flowlog_tagger.logging import PACKAGE_LOGGER
from flowlog_tagger.reference import load_reference_tables

FIXTURE_DATA = PROJECT_ROOT / "tests" / "fixtures" / "data"


@pytest.fixture
def flow_line():
    """Return a builder for version 2 flow log lines with a given destination port and protocol."""

    def _line(dstport: str, protocol: str) -> str:
        return (
            f"2 123456789012 eni-0a1b2c3d 10.0.1.201 198.51.100.2 443 {dstport} {protocol} "
            "25 20000 1620140761 1620140821 ACCEPT OK"
        )

    return _line


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper writing ``lines`` to ``tmp_path / name``."""

    def _write(name: str, *lines: str) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def lookup_file() -> Path:
    return FIXTURE_DATA / "lookup.csv"


@pytest.fixture
def protocol_file() -> Path:
    return FIXTURE_DATA / "protocol-numbers.csv"


@pytest.fixture
def flow_log_file() -> Path:
    return FIXTURE_DATA / "flow_log.txt"


@pytest.fixture
def classifier(lookup_file: Path, protocol_file: Path) -> Classifier:
    return Classifier(load_reference_tables(lookup_file, protocol_file))


@pytest.fixture(autouse=True)
def _reset_log_level():
    """CLI runs may change the package log level; restore it after each test."""
    root = logging.getLogger(PACKAGE_LOGGER)
    previous = root.level
    yield
    root.setLevel(previous)
