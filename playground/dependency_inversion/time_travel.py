from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeTraveling(Protocol):
    def travel_in_time(self, time: float) -> str: ...


class DeLorean:
    def travel_in_time(self, time: float) -> str:
        return f"Used Flux Capacitor and travelled in time by: {float(time)}s"


class EmmettBrown:
    """Knows how to use a time machine, not how one is built."""

    def __init__(self, time_machine: TimeTraveling):
        self._time_machine = time_machine

    def travel_in_time(self, time: float) -> str:
        return self._time_machine.travel_in_time(time)
