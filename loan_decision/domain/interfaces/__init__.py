"""
Domain Interfaces (Ports)
"""

from .personal_code import PersonalCodeValidator, PersonalCodeParser

__all__ = [
    "PersonalCodeValidator",
    "PersonalCodeParser",
]
