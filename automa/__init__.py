"""automa - Embeddable finite state machine with a fluent declaration API."""
from __future__ import annotations

from automa.builder import TransitionDescriptor
from automa.machine import Automa
from automa.table import TransitionTable
from automa.types import (
    Action,
    AutomaError,
    ConfigurationError,
    EventId,
    StateId,
    Transition,
    noop,
)

__all__ = [
    "Automa",
    "TransitionDescriptor",
    "TransitionTable",
    "Transition",
    "StateId",
    "EventId",
    "Action",
    "AutomaError",
    "ConfigurationError",
    "noop",
]
