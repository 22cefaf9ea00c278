"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from curprfc.domain.services import Validator


@pytest.fixture
def validator() -> Validator:
    """Validator pinned to the 1950-2025 window."""
    return Validator(min_year=1950, max_year=2025)


@pytest.fixture
def valid_curp() -> str:
    """Surnames GO/G, name M, born 1990-01-01, male, Distrito Federal."""
    return "GOGM900101HDFRRS05"


@pytest.fixture
def valid_rfc() -> str:
    """Persona Física RFC sharing the CURP prefix."""
    return "GOGM900101AB1"


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a TOML config and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(text)
        return path

    return _write
