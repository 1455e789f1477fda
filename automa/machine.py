"""Automa - state machine engine and its event dispatch loop."""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from automa.builder import TransitionDescriptor
from automa.table import TransitionTable
from automa.types import ConfigurationError, EventId, StateId

logger = logging.getLogger(__name__)

_TransitionHook = Callable[[StateId, StateId, EventId], None]


class Automa:
    """State machine driven by events signalled one at a time.

    Example::

        player = Automa(STOPPED)
        player.from_state(STOPPED).go_to(PLAYING).when(PLAY).and_do(play)
        player.from_state(PLAYING).go_to(PAUSED).when(PLAY).and_do(pause)
        player.from_state(PLAYING).go_to(STOPPED).when(STOP).and_do(stop)

        player.signal(PLAY)

    Events signalled from inside an action are queued and handled after
    the current one, against the state it leaves behind.  Once a child
    machine is attached, every event goes to the child instead.

    ``on_transition(old_state, new_state, event)`` is called after each
    fired transition, with ``state`` already updated.
    """

    def __init__(
        self,
        initial_state: StateId,
        on_transition: _TransitionHook | None = None,
    ) -> None:
        self._state = initial_state
        self._table = TransitionTable()
        self._queue: deque[EventId] = deque()
        self._processing = False
        self._child: Automa | None = None
        self._on_transition = on_transition

    @property
    def state(self) -> StateId:
        """Current state of the machine."""
        return self._state

    @property
    def transitions(self) -> TransitionTable:
        """Table the declarations of this machine are appended to."""
        return self._table

    @property
    def child(self) -> Automa | None:
        """Attached child machine, or None."""
        return self._child

    @property
    def processing(self) -> bool:
        """True while the event queue is being drained."""
        return self._processing

    def pending(self) -> int:
        """Return the number of events waiting to be processed."""
        return len(self._queue)

    def from_state(self, state: StateId) -> TransitionDescriptor:
        """Start declaring a transition out of ``state``."""
        return TransitionDescriptor(self._table, state)

    def stay_on(self, state: StateId) -> TransitionDescriptor:
        """Start declaring a transition from ``state`` back to itself."""
        return self.from_state(state).stay()

    def attach_child(self, child: Automa) -> None:
        """Forward every future event to ``child``.

        Delegation covers all parent states and cannot be undone.  The
        parent's state stops changing from the next event on; when called
        from inside an action, the transition that action belongs to still
        moves the parent to its final state.
        """
        if self._child is not None:
            raise ConfigurationError("A child machine is already attached")
        node: Automa | None = child
        while node is not None:
            if node is self:
                raise ConfigurationError(
                    "Attaching this child would create a delegation cycle"
                )
            node = node._child
        self._child = child
        logger.debug("Attached child machine in state %r", child.state)

    def signal(self, event: EventId) -> None:
        """Queue ``event`` and, unless already draining, process the queue.

        An exception raised by an action propagates unchanged.  The machine
        then keeps its pre-transition state, stays marked as processing and
        keeps the remaining events; call ``reset()`` before reusing it.
        """
        self._queue.append(event)
        if self._processing:
            return
        self._drain()

    def reset(self) -> None:
        """Drop queued events and clear the processing flag."""
        if self._queue:
            logger.debug("Reset dropped %d queued event(s)", len(self._queue))
        self._queue.clear()
        self._processing = False

    def _drain(self) -> None:
        self._processing = True
        while self._queue:
            event = self._queue.popleft()
            if self._child is not None:
                logger.debug("Forwarding %r to child machine", event)
                self._child.signal(event)
                continue
            transition = self._table.find(self._state, event)
            if transition is None:
                logger.debug("Ignoring %r in state %r", event, self._state)
                continue
            transition.action()
            old = self._state
            self._state = transition.final_state
            logger.debug("Transition %r --%r--> %r", old, event, self._state)
            if self._on_transition is not None:
                self._on_transition(old, self._state, event)
        self._processing = False
