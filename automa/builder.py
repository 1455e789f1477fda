"""TransitionDescriptor - fluent declaration of a single transition."""
from __future__ import annotations

import logging

from automa.table import TransitionTable
from automa.types import Action, ConfigurationError, EventId, StateId, Transition, noop

logger = logging.getLogger(__name__)

_UNSET = object()


class TransitionDescriptor:
    """Accumulates the parts of one transition until ``and_do`` is called.

    Usage::

        machine.from_state(STOPPED).go_to(PLAYING).when(PLAY).and_do(play)

    Nothing reaches the table before ``and_do``; a descriptor produces
    exactly one transition.
    """

    def __init__(self, table: TransitionTable, initial_state: StateId) -> None:
        self._table = table
        self._initial_state = initial_state
        self._final_state: object = _UNSET
        self._event: object = _UNSET
        self._done = False

    def go_to(self, final_state: StateId) -> TransitionDescriptor:
        """Set the state the machine moves to."""
        self._final_state = final_state
        return self

    def stay(self) -> TransitionDescriptor:
        """Set the final state to the initial one."""
        return self.go_to(self._initial_state)

    def when(self, event: EventId) -> TransitionDescriptor:
        """Set the event that triggers the transition."""
        self._event = event
        return self

    def and_do(self, action: Action) -> Transition:
        """Finalize the declaration and register it.

        Raises ``ConfigurationError`` if the final state or the event is
        missing, if ``action`` is not callable, or if this descriptor was
        already finalized.
        """
        if self._done:
            raise ConfigurationError(
                f"Transition from {self._initial_state!r} is already declared"
            )
        if self._final_state is _UNSET:
            raise ConfigurationError(
                f"Transition from {self._initial_state!r} has no final state, "
                "call go_to() or stay() before and_do()"
            )
        if self._event is _UNSET:
            raise ConfigurationError(
                f"Transition from {self._initial_state!r} has no event, "
                "call when() before and_do()"
            )
        if not callable(action):
            raise ConfigurationError(f"Action must be callable, got {action!r}")
        transition = Transition(
            initial_state=self._initial_state,
            event=self._event,
            final_state=self._final_state,
            action=action,
        )
        self._table.append(transition)
        self._done = True
        logger.debug(
            "Declared %r --%r--> %r",
            transition.initial_state, transition.event, transition.final_state,
        )
        return transition

    def and_do_nothing(self) -> Transition:
        """Finalize the declaration with an action that does nothing."""
        return self.and_do(noop)
