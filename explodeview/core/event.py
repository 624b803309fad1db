"""Observable values pushed from the timeline to the presentation layer."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class ChangeEvent(Generic[T]):
    """
    Current value plus the listeners interested in it.

    publish() stores a new value and notifies listeners only if it differs
    from the stored one, so a slider bound to progress is not redrawn on
    ticks that change nothing.

    Usage:
        on_progress: ChangeEvent[float] = ChangeEvent(0.0)
        on_progress += slider.set_value
        on_progress.publish(0.25)        # slider.set_value(0.25)
        on_progress.publish(0.25)        # nothing
        detach = on_progress.connect(label.set_text, replay=True)
        detach()

    A listener may disconnect itself while being notified; the current
    publish finishes with the listeners it started with.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._listeners: list[Listener] = []

    @property
    def value(self) -> T:
        """Last published value."""
        return self._value

    def connect(self, listener: Listener, replay: bool = False) -> Callable[[], None]:
        """
        Add listener; with replay=True it is called at once with the
        current value. Returns a function that disconnects it.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)
        if replay:
            listener(self._value)
        return lambda: self.disconnect(listener)

    def disconnect(self, listener: Listener) -> bool:
        """Remove listener; False if it was not connected."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def __iadd__(self, listener: Listener) -> "ChangeEvent[T]":
        self.connect(listener)
        return self

    def __isub__(self, listener: Listener) -> "ChangeEvent[T]":
        self.disconnect(listener)
        return self

    def publish(self, value: T) -> bool:
        """Store value; True (and listeners notified) if it changed."""
        if value == self._value:
            return False
        self._value = value
        for listener in tuple(self._listeners):
            listener(value)
        return True

    def __len__(self) -> int:
        return len(self._listeners)
