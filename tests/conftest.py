"""Pytest configuration and fixtures for Calendario tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

# Add the parent directory to sys.path so calendario can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calendario import clock as clock_module  # noqa: E402
from calendario._internal.constants import TODAY_ENV_VAR  # noqa: E402
from calendario.clock import FixedClock  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def isolated_default_clock(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without an environment override or cached clock."""
    monkeypatch.delenv(TODAY_ENV_VAR, raising=False)
    clock_module.set_clock(None)
    yield
    clock_module.set_clock(None)


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to the last day of 2024."""
    return FixedClock(2024, 12, 31)
