"""Coroutine state machine backing suspendable sequence-producing routines."""

import functools
import logging
from typing import Any, Callable, Generator, Optional, Union

from .errors import ComputationError, LazySequenceError, MisuseError
from .interfaces import IterableSource, IteratorHandle
from .models import (
    EXHAUSTED,
    NO_VALUE,
    CoroutineStatus,
    Delegate,
    Finish,
    Produced,
    StepResult,
    Suspend,
    Transition,
)
from .protocols import LoggerProtocol
from .sources import as_source


def delegate(source: Any) -> Delegate:
    """
    Build a delegation request for use inside a coroutine body.

    ``yield delegate(source)`` splices every value of ``source`` into the
    parent's sequence; the expression evaluates to the child's return value
    once the child is exhausted.

    Args:
        source: An iterable source, a container, or an iterator handle that
            the parent takes ownership of

    Returns:
        A ``Delegate`` transition
    """
    return Delegate(source)


def open_handle(source: Any) -> IteratorHandle:
    """Return ``source`` if it is already a handle, otherwise a fresh handle from it."""
    if isinstance(source, IteratorHandle):
        return source
    return as_source(source).iterator()


class CoroutineEngine(IteratorHandle):
    """
    State machine shared by every coroutine encoding.

    Tracks the status (not started, suspended, running, completed), the
    active delegated child and the body's return value. Subclasses supply
    the body through ``_advance`` and ``_fail``, each returning the next
    ``Transition``.
    """

    def __init__(
        self,
        name: str,
        unbounded: bool = False,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize engine.

        Args:
            name: Name used in log and error messages
            unbounded: Whether the body never finishes on its own
            logger: Logger instance
        """
        self.name = name
        self.return_value: Any = None
        self._unbounded = unbounded
        self._status = CoroutineStatus.NOT_STARTED
        self._child: Optional[IteratorHandle] = None
        self._point: Optional[int] = None
        self._logger = logger or logging.getLogger(__name__)

    @property
    def status(self) -> CoroutineStatus:
        return self._status

    @property
    def unbounded(self) -> bool:
        return self._unbounded

    @property
    def suspended_at(self) -> Optional[int]:
        """Identifier of the suspension point to resume from, if suspended."""
        if self._status is CoroutineStatus.SUSPENDED:
            return self._point
        return None

    @property
    def delegating(self) -> bool:
        return self._child is not None

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        """
        Resume the body and run it to the next suspension point.

        Args:
            resume: Value the pending suspension point evaluates to. Ignored
                on the first step, because no suspension point is pending.

        Returns:
            ``Produced(value)`` at a suspension point, ``EXHAUSTED`` once the
            body has finished

        Raises:
            ComputationError: If the body raises; the coroutine is completed
            MisuseError: If called while the coroutine is already running
        """
        if self._status is CoroutineStatus.COMPLETED:
            return EXHAUSTED
        if self._status is CoroutineStatus.RUNNING:
            raise MisuseError(f"{self.name} is already running")

        if self._status is CoroutineStatus.NOT_STARTED:
            resume = NO_VALUE
        previous = self._status
        self._status = CoroutineStatus.RUNNING

        try:
            result = self._drive(resume)
        except LazySequenceError:
            self._complete()
            raise
        except Exception as e:
            self._complete()
            self._logger.debug(f"{self.name}: body raised {type(e).__name__}")
            raise ComputationError(
                f"{self.name} raised {type(e).__name__}: {e}"
            ) from e
        except BaseException:
            self._complete()
            raise

        self._logger.debug(f"{self.name}: {previous.value} -> {self._status.value}")
        return result

    def _drive(self, sent: Any) -> StepResult:
        while True:
            if self._child is not None:
                transition = self._forward(sent)
                if isinstance(transition, Produced):
                    return transition
            else:
                transition = self._advance(sent)

            if isinstance(transition, Delegate):
                self._point = transition.resume_at
                self._child = open_handle(transition.source)
                self._logger.debug(f"{self.name}: delegating to {self._child!r}")
                sent = NO_VALUE
                continue
            if isinstance(transition, Finish):
                self.return_value = transition.value
                self._complete()
                return EXHAUSTED
            if isinstance(transition, Suspend):
                self._point = transition.resume_at
                self._status = CoroutineStatus.SUSPENDED
                return Produced(transition.value)
            raise TypeError(f"{self.name} produced an unknown transition {transition!r}")

    def _forward(self, sent: Any) -> Union[Produced, Transition]:
        """Step the delegated child; fall through to the body once it is exhausted."""
        child = self._child
        try:
            result = child.step(sent)
        except LazySequenceError as e:
            self._child = None
            return self._fail(e)

        if not result.exhausted:
            self._status = CoroutineStatus.SUSPENDED
            return result

        self._child = None
        self._logger.debug(f"{self.name}: delegation to {child!r} finished")
        return self._advance(getattr(child, "return_value", None))

    def _complete(self) -> None:
        self._status = CoroutineStatus.COMPLETED
        self._child = None
        self._point = None
        self._release()

    def _advance(self, sent: Any) -> Transition:
        """Run the body from the pending suspension point with ``sent`` as its value."""
        raise NotImplementedError

    def _fail(self, error: Exception) -> Transition:
        """Raise ``error`` at the pending suspension point."""
        raise error

    def _release(self) -> None:
        """Drop references held by the body once completed."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self._status.value}>"


def _plain_iterator(inner: Any) -> bool:
    return inner is not None and not hasattr(inner, "send")


class Coroutine(CoroutineEngine):
    """
    Coroutine whose body is a Python generator.

    Plain ``yield value`` statements are suspension points. Yielding a
    ``Delegate`` (see ``delegate``) splices another sequence in. Locals live
    in the suspended generator frame, so they survive every suspension.
    """

    def __init__(
        self,
        body: Generator,
        name: Optional[str] = None,
        unbounded: bool = False,
        logger: Optional[LoggerProtocol] = None,
    ):
        super().__init__(name or body.__name__, unbounded, logger)
        self._body = body
        self._started = False

    def _advance(self, sent: Any) -> Transition:
        if not self._started:
            self._started = True
            sent = None
        elif _plain_iterator(self._body.gi_yieldfrom):
            # plain iterators under `yield from` only accept None
            sent = None
        try:
            yielded = self._body.send(sent)
        except StopIteration as stop:
            return Finish(stop.value)
        return self._transition(yielded)

    def _fail(self, error: Exception) -> Transition:
        try:
            yielded = self._body.throw(error)
        except StopIteration as stop:
            return Finish(stop.value)
        return self._transition(yielded)

    def _transition(self, yielded: Any) -> Transition:
        frame = self._body.gi_frame
        point = frame.f_lineno if frame is not None else None
        if isinstance(yielded, Delegate):
            return Delegate(yielded.source, point)
        return Suspend(yielded, point)

    def _release(self) -> None:
        self._body.close()


class FactorySource(IterableSource):
    """Iterable capability that builds a fresh handle from a factory on every call."""

    def __init__(
        self,
        factory: Callable[..., IteratorHandle],
        *args,
        unbounded: bool = False,
        **kwargs,
    ):
        self.factory = factory
        self.args = args
        self.kwargs = kwargs
        self._unbounded = unbounded

    @property
    def unbounded(self) -> bool:
        return self._unbounded

    def iterator(self) -> IteratorHandle:
        return self.factory(*self.args, **self.kwargs)

    def __repr__(self) -> str:
        name = getattr(self.factory, "__name__", repr(self.factory))
        return f"FactorySource({name}, args={self.args!r})"


class CoroutineFunction(IterableSource):
    """
    A generator function turned into a coroutine factory.

    Calling it returns a new ``Coroutine`` in the not-started state. Used as
    an iterable source it calls the function without arguments.
    """

    def __init__(self, func: Callable[..., Generator], unbounded: bool = False):
        functools.update_wrapper(self, func)
        self.func = func
        self._unbounded = unbounded

    @property
    def unbounded(self) -> bool:
        return self._unbounded

    def __call__(self, *args, **kwargs) -> Coroutine:
        return Coroutine(
            self.func(*args, **kwargs),
            name=self.func.__name__,
            unbounded=self._unbounded,
        )

    def source(self, *args, **kwargs) -> FactorySource:
        """Bind arguments and return an iterable source of fresh coroutines."""
        return FactorySource(self, *args, unbounded=self._unbounded, **kwargs)

    def iterator(self) -> IteratorHandle:
        return self()

    def __repr__(self) -> str:
        return f"<coroutine function {self.func.__name__}>"


def coroutine(func: Optional[Callable[..., Generator]] = None, *, unbounded: bool = False):
    """
    Decorate a generator function as a coroutine factory.

    Usage::

        @coroutine
        def count_up_to(maximum):
            for i in range(1, maximum + 1):
                yield i

        @coroutine(unbounded=True)
        def count_from(start=1):
            while True:
                yield start
                start += 1

    Args:
        func: Generator function
        unbounded: Mark the sequence as infinite, so ``drain_all`` refuses it
    """
    if func is None:
        return functools.partial(coroutine, unbounded=unbounded)
    return CoroutineFunction(func, unbounded=unbounded)
