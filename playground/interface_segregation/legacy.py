"""Interface Segregation violation.

Clients should not be forced to depend on methods they do not use.
`LogStyle` bundles three styles, so a logger that only ever lowercases
still has to carry (and fail on) the other two.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from playground.errors import UnsupportedStyleError
from playground.logger import get_logger

log = get_logger("isp.legacy")


class LogStyle(ABC):
    @abstractmethod
    def lower_case(self, message: str) -> str:
        pass

    @abstractmethod
    def upper_case(self, message: str) -> str:
        pass

    @abstractmethod
    def capitalized(self, message: str) -> str:
        pass


class Logger(LogStyle):
    def lower_case(self, message: str) -> str:
        styled = message.lower()
        log.info(styled)
        return styled

    def upper_case(self, message: str) -> str:
        styled = message.upper()
        log.info(styled)
        return styled

    def capitalized(self, message: str) -> str:
        styled = message.capitalize()
        log.info(styled)
        return styled


class LoggerLowerCase(LogStyle):
    def lower_case(self, message: str) -> str:
        styled = message.lower()
        log.info(styled)
        return styled

    def upper_case(self, message: str) -> str:  # not used
        raise UnsupportedStyleError("LoggerLowerCase.upper_case")

    def capitalized(self, message: str) -> str:  # not used
        raise UnsupportedStyleError("LoggerLowerCase.capitalized")


class UpperCase(LogStyle):
    def lower_case(self, message: str) -> str:
        raise UnsupportedStyleError("UpperCase.lower_case")

    def upper_case(self, message: str) -> str:
        styled = message.upper()
        log.info(styled)
        return styled

    def capitalized(self, message: str) -> str:  # not used
        raise UnsupportedStyleError("UpperCase.capitalized")
