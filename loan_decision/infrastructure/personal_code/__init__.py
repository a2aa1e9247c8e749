"""Personal identity code implementations."""

from .estonian import EstonianPersonalCodeValidator, EstonianPersonalCodeParser

__all__ = [
    "EstonianPersonalCodeValidator",
    "EstonianPersonalCodeParser",
]
