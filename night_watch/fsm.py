"""Table-driven finite state machines with edge-attached entry actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Hashable, TypeVar

if TYPE_CHECKING:
    from night_watch.types import TickContext

S = TypeVar("S", bound=Hashable)

Guard = Callable[[Any, "TickContext"], bool]
OnTransition = Callable[[Any, "TickContext", Any, Any], None]


@dataclass
class FSM(Generic[S]):
    """Finite state machine. Transition table maps states to guard/target pairs.

    Edges of a state are tried in order; the first guard that passes wins.
    """

    state: S
    transitions: dict[S, list[tuple[str, S]]]


class FSMGuards:
    """Maps guard name strings to callable predicates over ``(game, ctx)``."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, game: Any, ctx: TickContext) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](game, ctx)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def make_fsm_step(
    guards: FSMGuards,
    on_transition: OnTransition | None = None,
) -> Callable[[FSM[Any], Any, TickContext], bool]:
    """Return a step function that fires at most one transition per call.

    ``on_transition(game, ctx, old, new)`` runs after the state has changed,
    once per fired edge, which makes it the place for entry actions.
    Returns True when a transition fired.
    """

    def _find_transition(fsm: FSM[Any], game: Any, ctx: TickContext) -> Any:
        for guard_name, target in fsm.transitions.get(fsm.state, ()):
            if guards.check(guard_name, game, ctx):
                return target
        return None

    def fsm_step(fsm: FSM[Any], game: Any, ctx: TickContext) -> bool:
        target = _find_transition(fsm, game, ctx)
        if target is None:
            return False
        old = fsm.state
        fsm.state = target
        if on_transition is not None:
            on_transition(game, ctx, old, target)
        return True

    return fsm_step
