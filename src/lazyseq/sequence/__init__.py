"""Lazy sequences: iterator protocol, iterable sources, coroutines and consumers."""

from .consumers import (
    BatchHandle,
    ChainHandle,
    FilteredHandle,
    MappedHandle,
    batch,
    chain,
    drain_all,
    filter_handle,
    map_handle,
    take,
)
from .coroutine import (
    Coroutine,
    CoroutineEngine,
    CoroutineFunction,
    FactorySource,
    coroutine,
    delegate,
    open_handle,
)
from .errors import ComputationError, LazySequenceError, MisuseError
from .frames import to_frame, to_table
from .interfaces import IterableSource, IteratorHandle
from .machine import ENTRY_POINT, SegmentedCoroutine
from .models import (
    EXHAUSTED,
    NO_VALUE,
    Bindings,
    CoroutineStatus,
    Delegate,
    Finish,
    Produced,
    StepResult,
    Suspend,
)
from .protocols import LoggerProtocol
from .sources import (
    MappingSource,
    SequenceSource,
    SetSource,
    TextSource,
    as_source,
    iterator,
)
from .utils import MemoryProfiler, StepCounter

__all__ = [
    # Models
    "StepResult",
    "Produced",
    "EXHAUSTED",
    "NO_VALUE",
    "CoroutineStatus",
    "Bindings",
    "Suspend",
    "Finish",
    "Delegate",
    # Errors
    "LazySequenceError",
    "ComputationError",
    "MisuseError",
    # Interfaces
    "IteratorHandle",
    "IterableSource",
    "LoggerProtocol",
    # Sources
    "SequenceSource",
    "TextSource",
    "MappingSource",
    "SetSource",
    "as_source",
    "iterator",
    # Coroutines
    "CoroutineEngine",
    "Coroutine",
    "CoroutineFunction",
    "FactorySource",
    "SegmentedCoroutine",
    "ENTRY_POINT",
    "coroutine",
    "delegate",
    "open_handle",
    # Consumers
    "take",
    "drain_all",
    "map_handle",
    "filter_handle",
    "chain",
    "batch",
    "MappedHandle",
    "FilteredHandle",
    "ChainHandle",
    "BatchHandle",
    "to_frame",
    "to_table",
    # Utils
    "StepCounter",
    "MemoryProfiler",
]
