"""Interface Segregation page.

One provider can satisfy several narrow capabilities; it is registered
under each of them.
"""

from playground.registry import register_capability, register_provider

from . import legacy
from .refactor import (
    LoggerLowerCaseAndUpperCase,
    LogStyleCapitalized,
    LogStyleLowerCase,
    LogStyleUpperCase,
)

register_capability("lower_case", LogStyleLowerCase)
register_capability("upper_case", LogStyleUpperCase)
register_capability("capitalized", LogStyleCapitalized)
register_provider("lower_case", "lower_and_upper", LoggerLowerCaseAndUpperCase)
register_provider("upper_case", "lower_and_upper", LoggerLowerCaseAndUpperCase)

__all__ = [
    "legacy",
    "LogStyleLowerCase",
    "LogStyleUpperCase",
    "LogStyleCapitalized",
    "LoggerLowerCaseAndUpperCase",
]
