"""The Store: explicit owner of StoreState.

Constructed once by the composition root and passed to whatever needs
it. ``dispatch`` and ``subscribe`` are the only ways in; ``state`` is
read-only.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.actions import Action
from storefront.domain.model.state import StoreState
from storefront.domain.reducer import reduce

Listener = Callable[[StoreState, StoreState], None]
Reducer = Callable[[StoreState, Action], StoreState]


class Store:

    def __init__(
        self,
        reducer: Reducer = reduce,
        initial_state: StoreState | None = None,
    ) -> None:
        self._reducer = reducer
        self._state = initial_state if initial_state is not None else StoreState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> StoreState:
        return self._state

    def dispatch(self, action: Action) -> StoreState:
        """Run ``action`` through the reducer and notify subscribers.

        Listeners are called with ``(previous, current)`` and only when
        the reducer produced a new state object. A listener that raises
        propagates to the caller; the new state is already in place.
        """
        previous = self._state
        self._state = self._reducer(previous, action)
        if self._state is not previous:
            for listener in list(self._listeners):
                listener(previous, self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
