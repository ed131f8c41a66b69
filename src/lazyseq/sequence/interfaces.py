"""Abstract interfaces for iterator handles and iterable sources."""

from abc import ABC, abstractmethod
from typing import Any

from .models import NO_VALUE, StepResult


class IteratorHandle(ABC):
    """Abstract base class for stateful iterator handles.

    A handle owns all of the state needed to compute its next value. It is
    advanced only through ``step()`` and must have a single logical owner.
    """

    @property
    def unbounded(self) -> bool:
        """True when the handle never exhausts on its own."""
        return False

    @abstractmethod
    def step(self, resume: Any = NO_VALUE) -> StepResult:
        """Advance the handle by one value.

        Args:
            resume: Optional value passed back to a suspended coroutine.
                Handles that are not backed by a coroutine ignore it.

        Returns:
            ``Produced(value)`` or ``EXHAUSTED``. Once ``EXHAUSTED`` has been
            returned, every later call returns ``EXHAUSTED`` again.
        """
        pass

    def __iter__(self) -> "IteratorHandle":
        return self

    def __next__(self) -> Any:
        result = self.step()
        if result.exhausted:
            raise StopIteration
        return result.value


class IterableSource(ABC):
    """Abstract base class for anything that can manufacture iterator handles."""

    @property
    def unbounded(self) -> bool:
        """True when handles from this source never exhaust on their own."""
        return False

    @abstractmethod
    def iterator(self) -> IteratorHandle:
        """Return a new handle, independent of every handle created before."""
        pass

    def __iter__(self) -> IteratorHandle:
        return self.iterator()
