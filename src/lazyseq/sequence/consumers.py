"""Consumers and composition wrappers built on the iterator protocol."""

import logging
from typing import Any, Callable, List, Optional

from .coroutine import open_handle
from .errors import ComputationError, LazySequenceError, MisuseError
from .interfaces import IteratorHandle
from .models import EXHAUSTED, NO_VALUE, Produced, StepResult

logger = logging.getLogger(__name__)


def take(handle: IteratorHandle, n: int) -> List[Any]:
    """
    Collect at most ``n`` values from a handle.

    Never calls ``step()`` more than ``n`` times, so this is the safe way to
    read from an infinite sequence. The handle is left where it stopped.

    Args:
        handle: Handle to read from
        n: Maximum number of values

    Returns:
        The values produced, fewer than ``n`` if the handle exhausted first
    """
    if n < 0:
        raise ValueError("n must not be negative")
    values: List[Any] = []
    for _ in range(n):
        result = handle.step()
        if result.exhausted:
            break
        values.append(result.value)
    logger.debug(f"take: collected {len(values)} of {n} values")
    return values


def drain_all(handle: IteratorHandle) -> List[Any]:
    """
    Collect every remaining value from a finite handle.

    Only valid for sequences that are guaranteed to end. Handles that are
    declared unbounded are refused; an undeclared infinite sequence never
    returns.

    Args:
        handle: Handle to drain

    Returns:
        All remaining values in order

    Raises:
        MisuseError: If the handle is declared unbounded
    """
    if handle.unbounded:
        raise MisuseError(f"refusing to drain unbounded sequence {handle!r}; use take()")
    values: List[Any] = []
    while True:
        result = handle.step()
        if result.exhausted:
            return values
        values.append(result.value)


def _inner_failure(inner: IteratorHandle, error: Exception) -> ComputationError:
    return ComputationError(f"{inner!r} raised {type(error).__name__}: {error}")


class WrappedHandle(IteratorHandle):
    """Base class for handles that step an inner handle on demand."""

    def __init__(self, inner: IteratorHandle):
        self._inner = inner
        self._done = False

    @property
    def unbounded(self) -> bool:
        return self._inner.unbounded

    def _pull(self, resume: Any) -> StepResult:
        try:
            return self._inner.step(resume)
        except LazySequenceError:
            self._done = True
            raise
        except Exception as e:
            self._done = True
            raise _inner_failure(self._inner, e) from e

    def _finish(self) -> StepResult:
        self._done = True
        return EXHAUSTED

    def _call(self, func: Callable, value: Any) -> Any:
        try:
            return func(value)
        except Exception as e:
            self._done = True
            raise ComputationError(
                f"{getattr(func, '__name__', func)!s} raised {type(e).__name__}: {e}"
            ) from e


class MappedHandle(WrappedHandle):
    """Applies a pure function to each produced value."""

    def __init__(self, inner: IteratorHandle, fn: Callable[[Any], Any]):
        super().__init__(inner)
        self.fn = fn

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        if self._done:
            return EXHAUSTED
        result = self._pull(resume)
        if result.exhausted:
            return self._finish()
        return Produced(self._call(self.fn, result.value))


class FilteredHandle(WrappedHandle):
    """Skips produced values that do not satisfy a predicate."""

    def __init__(self, inner: IteratorHandle, predicate: Callable[[Any], bool]):
        super().__init__(inner)
        self.predicate = predicate

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        if self._done:
            return EXHAUSTED
        while True:
            result = self._pull(resume)
            if result.exhausted:
                return self._finish()
            if self._call(self.predicate, result.value):
                return result
            resume = NO_VALUE


def map_handle(handle: IteratorHandle, fn: Callable[[Any], Any]) -> IteratorHandle:
    """Wrap a handle so every produced value goes through ``fn``."""
    return MappedHandle(handle, fn)


def filter_handle(handle: IteratorHandle, predicate: Callable[[Any], bool]) -> IteratorHandle:
    """Wrap a handle so only values satisfying ``predicate`` are produced."""
    return FilteredHandle(handle, predicate)


class ChainHandle(IteratorHandle):
    """
    Walks several sources one after the other.

    Each source is opened only when the previous one is exhausted.
    """

    def __init__(self, sources):
        self._pending = list(sources)
        self._current: Optional[IteratorHandle] = None
        self._done = False

    @property
    def unbounded(self) -> bool:
        if self._current is not None and self._current.unbounded:
            return True
        return any(getattr(source, "unbounded", False) for source in self._pending)

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        if self._done:
            return EXHAUSTED
        while True:
            if self._current is None:
                if not self._pending:
                    self._done = True
                    return EXHAUSTED
                self._current = open_handle(self._pending.pop(0))
            try:
                result = self._current.step(resume)
            except LazySequenceError:
                self._abandon()
                raise
            except Exception as e:
                current = self._current
                self._abandon()
                raise _inner_failure(current, e) from e
            if not result.exhausted:
                return result
            self._current = None
            resume = NO_VALUE

    def _abandon(self) -> None:
        self._done = True
        self._current = None
        self._pending = []


def chain(*sources) -> IteratorHandle:
    """Return a handle producing every value of each source in turn."""
    return ChainHandle(sources)


class BatchHandle(WrappedHandle):
    """Groups produced values into lists of up to ``size`` values."""

    def __init__(self, inner: IteratorHandle, size: int):
        if size <= 0:
            raise ValueError("size must be positive")
        super().__init__(inner)
        self.size = size

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        if self._done:
            return EXHAUSTED
        try:
            values = take(self._inner, self.size)
        except LazySequenceError:
            self._done = True
            raise
        except Exception as e:
            self._done = True
            raise _inner_failure(self._inner, e) from e
        if len(values) < self.size:
            self._done = True
        if not values:
            return EXHAUSTED
        return Produced(values)


def batch(handle: IteratorHandle, size: int) -> IteratorHandle:
    """Wrap a handle so it produces lists of up to ``size`` values; the last may be short."""
    return BatchHandle(handle, size)
