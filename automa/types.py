"""Shared type aliases, the Transition record and errors for automa."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

StateId = Any
EventId = Any
Action = Callable[[], Any]


def noop() -> None:
    """Action that does nothing."""


@dataclass(frozen=True, slots=True)
class Transition:
    initial_state: StateId
    event: EventId
    final_state: StateId
    action: Action

    def matches(self, state: StateId, event: EventId) -> bool:
        return self.initial_state == state and self.event == event


class AutomaError(Exception):
    """Base class for errors raised by automa."""


class ConfigurationError(AutomaError):
    """Raised on malformed declarations or invalid child attachment."""
