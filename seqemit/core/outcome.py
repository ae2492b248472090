"""Tagged outcome of a single listener invocation."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Success:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: BaseException

    @property
    def ok(self) -> bool:
        return False


Outcome = Success | Failure


def classify(
    value: Any, error_types: tuple[type[BaseException], ...] = (Exception,)
) -> Outcome:
    """Map a listener's resolved value to Success or Failure.

    A listener that *returns* an instance of one of ``error_types`` has
    failed just like one that raised it.
    """
    if isinstance(value, error_types):
        return Failure(value)
    return Success(value)
