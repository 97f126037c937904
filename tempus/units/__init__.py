"""Temporal units and enumerations.

This module provides:
    - Era: BCE/CE era designation enum
    - TimeUnit: The unit keyword vocabulary (nanos ... forever)
    - Zone: Fixed-offset or rule-based time zone
"""

from __future__ import annotations

from tempus.units.era import Era
from tempus.units.timeunit import TimeUnit, unit
from tempus.units.zone import Zone

__all__: list[str] = [
    "Era",
    "TimeUnit",
    "Zone",
    "unit",
]
