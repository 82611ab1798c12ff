from __future__ import annotations

from typing import Protocol, runtime_checkable

from playground.logger import get_logger

log = get_logger("isp")


@runtime_checkable
class LogStyleLowerCase(Protocol):
    def lower_case(self, message: str) -> str: ...


@runtime_checkable
class LogStyleUpperCase(Protocol):
    def upper_case(self, message: str) -> str: ...


@runtime_checkable
class LogStyleCapitalized(Protocol):
    def capitalized(self, message: str) -> str: ...


class LoggerLowerCaseAndUpperCase:
    """Implements exactly the two styles it supports, nothing more."""

    def lower_case(self, message: str) -> str:
        styled = message.lower()
        log.info(styled)
        return styled

    def upper_case(self, message: str) -> str:
        styled = message.upper()
        log.info(styled)
        return styled
