"""Pytest configuration and fixtures for Tempus tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempus can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """Install a clock frozen at 2017-01-01T10:15:30.5Z for the test."""
    from tempus.clock import FixedClock, use_clock
    from tempus.core.instant import Instant

    clock = FixedClock(Instant(1_483_265_730, 500_000_000))
    with use_clock(clock):
        yield clock
