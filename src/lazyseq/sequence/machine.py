"""Coroutines encoded as explicit segments over a bindings record."""

from abc import abstractmethod
from typing import Any, Dict, Optional

from .coroutine import CoroutineEngine, FactorySource
from .models import Bindings, Delegate, Finish, Suspend, Transition
from .protocols import LoggerProtocol

ENTRY_POINT = 0


class SegmentedCoroutine(CoroutineEngine):
    """
    Coroutine whose body is split into numbered segments.

    The body is decomposed at its suspension points. ``resume`` receives the
    segment to run and the live ``Bindings``, mutates the bindings in place
    and returns the transition that ends the segment:

    * ``Suspend(value, resume_at=n)`` hands ``value`` to the caller and
      continues at segment ``n`` on the next step;
    * ``Delegate(source, resume_at=n)`` forwards steps to ``source`` until it
      is exhausted, then continues at segment ``n``;
    * ``Finish(value)`` ends the sequence.

    A ``Suspend`` or ``Delegate`` without ``resume_at`` continues at the same
    segment, which is how loops around a single suspension point are written.

    Example::

        class CountFrom(SegmentedCoroutine):
            infinite = True

            def start(self, first=1):
                return {"i": first}

            def resume(self, point, local, sent):
                value = local.i
                local.i += 1
                return Suspend(value)
    """

    infinite: bool = False

    def __init__(
        self,
        *args,
        name: Optional[str] = None,
        logger: Optional[LoggerProtocol] = None,
        **kwargs,
    ):
        super().__init__(
            name or type(self).__name__,
            unbounded=type(self).infinite,
            logger=logger,
        )
        self._locals = Bindings(self.start(*args, **kwargs))
        self._point = ENTRY_POINT

    @classmethod
    def source(cls, *args, **kwargs) -> FactorySource:
        """Return an iterable source that builds a fresh machine on every call."""
        return FactorySource(cls, *args, unbounded=cls.infinite, **kwargs)

    def start(self, *args, **kwargs) -> Dict[str, Any]:
        """Return the initial bindings built from the invocation arguments."""
        if args or kwargs:
            raise TypeError(f"{type(self).__name__} takes no arguments")
        return {}

    @abstractmethod
    def resume(self, point: int, local: Bindings, sent: Any) -> Transition:
        """
        Run one segment.

        Args:
            point: Segment to run; ``ENTRY_POINT`` on the first step
            local: Live bindings, mutated in place
            sent: Resume value for the pending suspension point, or
                ``NO_VALUE``

        Returns:
            The transition that ends the segment
        """
        pass

    @property
    def locals(self) -> Dict[str, Any]:
        """Snapshot of the live bindings."""
        return self._locals.to_dict()

    def _advance(self, sent: Any) -> Transition:
        point = self._point
        transition = self.resume(point, self._locals, sent)
        if isinstance(transition, Suspend) and transition.resume_at is None:
            return Suspend(transition.value, point)
        if isinstance(transition, Delegate) and transition.resume_at is None:
            return Delegate(transition.source, point)
        if isinstance(transition, (Suspend, Delegate, Finish)):
            return transition
        raise TypeError(
            f"{self.name} segment {point} returned {type(transition).__name__}, "
            f"expected Suspend, Delegate or Finish"
        )

    def _release(self) -> None:
        self._locals = Bindings({})

