from seqemit.core.errors import (
    EmitterError,
    InvalidEventName,
    InvalidListener,
    ListenerError,
)
from seqemit.core.events import EventEmitter, Listener
from seqemit.core.log import configure_logging
from seqemit.core.outcome import Failure, Success, classify

__all__ = [
    "EmitterError",
    "EventEmitter",
    "Failure",
    "InvalidEventName",
    "InvalidListener",
    "Listener",
    "ListenerError",
    "Success",
    "classify",
    "configure_logging",
]
