"""Exceptions raised by the event emitter."""


class EmitterError(Exception):
    """Base class for emitter errors."""


class InvalidEventName(EmitterError, ValueError):
    def __init__(self, message: str = "Invalid event name."):
        super().__init__(message)


class InvalidListener(EmitterError, TypeError):
    def __init__(self, message: str = "Invalid listener."):
        super().__init__(message)


class ListenerError(EmitterError):
    """Optional base for errors raised or returned by listener code.

    Listener errors are propagated verbatim by ``emit``; subclassing this
    is a convenience, not a requirement.
    """
