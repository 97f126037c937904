"""Era enumeration for BCE/CE designation."""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Historical era designation.

    Year 0 exists (astronomical convention) and is considered BCE.

    Examples:
        >>> Era.of_year(2017)
        <Era.CE: 'CE'>
        >>> Era.of_year(0)
        <Era.BCE: 'BCE'>
    """

    BCE = "BCE"  # Before Common Era
    CE = "CE"  # Common Era

    @classmethod
    def of_year(cls, year: int) -> Era:
        """Return the era containing an astronomical year number."""
        return cls.BCE if year <= 0 else cls.CE

    @property
    def ordinal(self) -> int:
        """Return 0 for BCE and 1 for CE, the order eras are counted in."""
        return 0 if self is Era.BCE else 1


__all__ = ["Era"]
