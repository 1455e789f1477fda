"""TransitionTable - ordered storage and lookup of transitions."""
from __future__ import annotations

from typing import Iterator

from automa.types import EventId, StateId, Transition


class TransitionTable:
    """Insertion-ordered collection of transitions owned by one machine.

    Later declarations override earlier ones for the same (state, event)
    pair: ``find`` returns the last match.
    """

    def __init__(self) -> None:
        self._transitions: list[Transition] = []

    def append(self, transition: Transition) -> None:
        """Add a transition after all existing ones."""
        self._transitions.append(transition)

    def find(self, state: StateId, event: EventId) -> Transition | None:
        """Return the last transition matching ``(state, event)``, or None."""
        for transition in reversed(self._transitions):
            if transition.matches(state, event):
                return transition
        return None

    def __len__(self) -> int:
        return len(self._transitions)

    def __iter__(self) -> Iterator[Transition]:
        return iter(list(self._transitions))
