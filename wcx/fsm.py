"""Table-driven finite state machine with enter, exit and transition callbacks."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

StateCallback = Callable[[int], None]
TransitionAction = Callable[[int, int, int], None]


@dataclass(frozen=True)
class FsmState:
    """A state identifier with optional callbacks run on entry and exit."""

    id: int
    on_enter: StateCallback | None = None
    on_exit: StateCallback | None = None


@dataclass(frozen=True)
class FsmTransition:
    """Move from ``from_state`` to ``to_state`` on ``event``, running ``action``."""

    from_state: int
    event: int
    to_state: int
    action: TransitionAction | None = None


class StateMachine:
    """Dispatches events against a transition table; the first matching row wins."""

    def __init__(
        self,
        initial_state: int,
        states: Iterable[FsmState] = (),
        transitions: Iterable[FsmTransition] = (),
    ) -> None:
        self.state = initial_state
        self.states = tuple(states)
        self.transitions = tuple(transitions)
        self._by_id: dict[int, FsmState] = {}
        for state in self.states:
            self._by_id.setdefault(state.id, state)

    def reset(self, state: int) -> None:
        """Jump to ``state`` without running any callbacks."""
        self.state = state

    def dispatch(self, event: int) -> bool:
        """Apply the first transition matching the current state and ``event``.

        Exit and enter callbacks are skipped on self transitions; the action
        always runs. Return whether a transition was taken.
        """
        for transition in self.transitions:
            if transition.from_state != self.state or transition.event != event:
                continue

            changing = transition.to_state != transition.from_state
            from_state = self._by_id.get(transition.from_state)
            to_state = self._by_id.get(transition.to_state)

            if changing and from_state is not None and from_state.on_exit is not None:
                from_state.on_exit(transition.from_state)

            if transition.action is not None:
                transition.action(transition.from_state, transition.event, transition.to_state)

            self.state = transition.to_state

            if changing and to_state is not None and to_state.on_enter is not None:
                to_state.on_enter(transition.to_state)

            return True
        return False