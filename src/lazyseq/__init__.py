"""lazyseq - Lazy sequences, iterator handles and suspendable coroutines."""

__version__ = "0.1.0"

from .sequence import (
    EXHAUSTED,
    NO_VALUE,
    ComputationError,
    IterableSource,
    IteratorHandle,
    MisuseError,
    Produced,
    SegmentedCoroutine,
    as_source,
    batch,
    chain,
    coroutine,
    delegate,
    drain_all,
    filter_handle,
    iterator,
    map_handle,
    take,
)

__all__ = [
    "EXHAUSTED",
    "NO_VALUE",
    "Produced",
    "ComputationError",
    "MisuseError",
    "IterableSource",
    "IteratorHandle",
    "SegmentedCoroutine",
    "as_source",
    "iterator",
    "coroutine",
    "delegate",
    "take",
    "drain_all",
    "map_handle",
    "filter_handle",
    "chain",
    "batch",
]
