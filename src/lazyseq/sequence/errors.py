"""Error taxonomy for lazy sequences."""


class LazySequenceError(Exception):
    """Base class for all lazyseq errors."""


class ComputationError(LazySequenceError):
    """A coroutine body or a transform/filter function raised while computing a value.

    The original exception is chained as ``__cause__``. The handle that
    raised is exhausted afterwards.
    """


class MisuseError(LazySequenceError):
    """A precondition of the iteration API was violated by the caller."""
