"""Sequential async event emitter.

Listeners registered for an event run strictly one after another, in
registration order. ``emit`` finishes once every listener has run, or
raises the first failure without visiting the rest.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from seqemit.core.config import settings
from seqemit.core.errors import InvalidEventName, InvalidListener
from seqemit.core.outcome import Failure, Outcome, classify

logger = logging.getLogger(__name__)

EventNames = str | list[str] | tuple[str, ...]


@dataclass(eq=False)
class Listener:
    callback: Callable[..., Any]
    once: bool = False


class EventEmitter:
    """Registry of named listeners with a sequential async dispatcher.

    Each event name maps to an ordered list of ``Listener`` slots. Removing
    a listener clears its slot to ``None`` instead of compacting the list,
    so a walk in progress keeps its position and simply skips the hole.
    Entries are created on first registration, removal or emission and
    are never deleted.
    """

    def __init__(
        self,
        error_types: tuple[type[BaseException], ...] = (Exception,),
        trace: bool | None = None,
    ):
        self._events: dict[str, list[Listener | None]] = {}
        self._error_types = error_types
        if trace is None:
            trace = settings.TRACE_DISPATCH or settings.DEBUG
        self._trace = trace

    # ---------- Registration ----------

    def on(self, names: EventNames, callback: Callable[..., Any]) -> None:
        """Register ``callback`` for one event name or each of a list."""
        for name in _iter_names(names):
            self.add_listener(name, callback)

    def once(self, names: EventNames, callback: Callable[..., Any]) -> None:
        """Like ``on``, but the listener is dropped once it has been invoked."""
        for name in _iter_names(names):
            self.add_listener(name, callback, once=True)

    def off(self, names: EventNames, callback: Callable[..., Any]) -> None:
        """Remove the first registration of ``callback`` for each name."""
        for name in _iter_names(names):
            self.remove_listener(name, callback)

    def listener(self, names: EventNames, once: bool = False):
        """Decorator to register an event listener."""
        def decorator(func: Callable[..., Any]):
            if once:
                self.once(names, func)
            else:
                self.on(names, func)
            return func
        return decorator

    # ---------- Introspection ----------

    def listeners(self, name: str) -> tuple[Callable[..., Any], ...]:
        slots = self._events.get(name, [])
        return tuple(slot.callback for slot in slots if slot is not None)

    def event_names(self) -> tuple[str, ...]:
        return tuple(self._events)

    # ---------- Dispatch ----------

    async def emit(self, name: str, *args: Any, **kwargs: Any) -> None:
        """Run the listeners for ``name`` one at a time.

        The list is read live: a slot cleared by an earlier listener is
        seen as a hole, and listeners appended during the walk are reached.
        Re-entrant ``emit`` calls get their own cursor.
        """
        slots = self._entry(name)
        index = 0
        while index < len(slots):
            listener = slots[index]
            if listener is None:
                index += 1
                continue

            if not callable(listener.callback):
                logger.debug(
                    "Slot %d of '%s' holds a non-callable listener", index, name
                )
                raise InvalidListener()

            if self._trace:
                logger.debug(
                    "emit '%s' [%d/%d] -> %r", name, index + 1, len(slots),
                    listener.callback,
                )

            outcome = await self._invoke(name, listener, args, kwargs)
            if isinstance(outcome, Failure):
                logger.debug(
                    "Listener %r for '%s' failed at slot %d: %r",
                    listener.callback, name, index, outcome.error,
                )
                raise outcome.error
            index += 1

        if self._trace:
            logger.debug("emit '%s' finished", name)

    async def _invoke(
        self,
        name: str,
        listener: Listener,
        args: tuple,
        kwargs: dict,
    ) -> Outcome:
        # One-shot listeners leave the list before their result is awaited,
        # so an overlapping emit of the same name cannot run them twice.
        try:
            result = listener.callback(*args, **kwargs)
        except Exception as exc:
            return Failure(exc)
        finally:
            if listener.once:
                self.remove_listener(name, listener.callback)

        if inspect.isawaitable(result):
            try:
                result = await result
            except Exception as exc:
                return Failure(exc)
        return classify(result, self._error_types)

    # ---------- Storage ----------

    def _entry(self, name: str) -> list[Listener | None]:
        return self._events.setdefault(name, [])

    def add_listener(
        self, name: str, callback: Callable[..., Any], once: bool = False
    ) -> None:
        """Append a listener record for a single event name."""
        _check(name, callback)
        self._entry(name).append(Listener(callback, once))
        logger.debug(
            "Registered %s listener %r for '%s'",
            "one-shot" if once else "persistent", callback, name,
        )

    def remove_listener(self, name: str, callback: Callable[..., Any]) -> None:
        """Clear the first slot of ``name`` holding ``callback``, if any."""
        _check(name, callback)
        slots = self._entry(name)
        for index, slot in enumerate(slots):
            if slot is not None and _same_callback(slot.callback, callback):
                slots[index] = None
                logger.debug("Removed listener %r from '%s'", callback, name)
                return


def _iter_names(names: EventNames) -> Iterable[str]:
    if isinstance(names, (list, tuple)):
        return names
    return (names,)


def _same_callback(stored: Any, callback: Any) -> bool:
    # Identity, except that bound methods are rebuilt on every attribute
    # access; those match on the same function bound to the same object.
    if stored is callback:
        return True
    return (
        inspect.ismethod(stored)
        and inspect.ismethod(callback)
        and stored.__self__ is callback.__self__
        and stored.__func__ is callback.__func__
    )


def _check(name: Any, callback: Any) -> None:
    if not isinstance(name, str) or len(name) <= 0:
        raise InvalidEventName()
    if not callable(callback):
        raise InvalidListener()
