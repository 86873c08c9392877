"""Synchronous event bus for generation lifecycle events."""

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus used by :class:`~tailsmith.engine.Generator`.

    A listener subscribed to a class receives events of that class and of
    its subclasses, so subscribing to ``GenerationEvent`` sees everything a
    generator emits. Dispatch happens on the emitting thread: global
    listeners first, then typed listeners from the most specific class
    outwards, each group in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Register *callback* for *event_type* and its subclasses."""
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> bool:
        """Remove one registration; returns False if it was not registered."""
        callbacks = self._listeners.get(event_type, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            del self._listeners[event_type]
        return True

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> int:
        """Dispatch *event* and return how many listeners received it.

        Listener exceptions propagate to the emitter.
        """
        targets = list(self._global_listeners)
        for cls in type(event).__mro__:
            targets.extend(self._listeners.get(cls, ()))
        for callback in targets:
            callback(event)
        return len(targets)

    @property
    def has_listeners(self) -> bool:
        return bool(self._global_listeners or self._listeners)
