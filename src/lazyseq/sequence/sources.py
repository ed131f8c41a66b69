"""Iterable sources for built-in container kinds."""

import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any, List, Tuple

from .errors import MisuseError
from .interfaces import IterableSource, IteratorHandle
from .models import EXHAUSTED, NO_VALUE, Produced, StepResult

logger = logging.getLogger(__name__)


class IndexHandle(IteratorHandle):
    """
    Walks an indexable container one position at a time.

    The container is read live: the length is checked on every step, so a
    handle sees items appended before it reaches the end.
    """

    def __init__(self, items: Sequence):
        self._items = items
        self._index = 0
        self._done = False

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        if self._done:
            return EXHAUSTED
        if self._index >= len(self._items):
            self._done = True
            self._items = ()
            return EXHAUSTED
        value = self._items[self._index]
        self._index += 1
        return Produced(value)


class SequenceSource(IterableSource):
    """Iterable capability for ordered containers (lists, tuples, ranges)."""

    def __init__(self, items: Sequence):
        if isinstance(items, (str, bytes)):
            raise MisuseError("use TextSource for string-like sequences")
        self.items = items

    def iterator(self) -> IteratorHandle:
        return IndexHandle(self.items)

    def __repr__(self) -> str:
        return f"SequenceSource({self.items!r})"


class TextSource(IterableSource):
    """Iterable capability for strings; each handle walks character by character."""

    def __init__(self, text: str):
        self.text = text

    def iterator(self) -> IteratorHandle:
        return IndexHandle(self.text)

    def __repr__(self) -> str:
        return f"TextSource({self.text!r})"


class MappingSource(IterableSource):
    """
    Iterable capability for associative containers.

    Each handle yields ``(key, value)`` entries in insertion order over a
    snapshot of the mapping taken when the handle is created.
    """

    def __init__(self, mapping: Mapping):
        self.mapping = mapping

    def iterator(self) -> IteratorHandle:
        entries: List[Tuple[Any, Any]] = list(self.mapping.items())
        return IndexHandle(entries)

    def __repr__(self) -> str:
        return f"MappingSource({self.mapping!r})"


class SetSource(IterableSource):
    """
    Iterable capability for unique-value containers.

    Values are deduplicated on construction, keeping first-seen order, so
    ``SetSource(["cotton", "premium", "cotton"])`` yields two values. Each
    handle enumerates a snapshot taken when the handle is created.
    """

    def __init__(self, values):
        self._values = dict.fromkeys(values)

    def add(self, value: Any) -> None:
        """Add a value; handles that already exist are not affected."""
        self._values[value] = None

    def iterator(self) -> IteratorHandle:
        return IndexHandle(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: Any) -> bool:
        return value in self._values

    def __repr__(self) -> str:
        return f"SetSource({list(self._values)!r})"


def as_source(obj: Any) -> IterableSource:
    """
    Return the iterable capability for a container.

    Args:
        obj: An ``IterableSource`` (returned unchanged), a string, a mapping,
            a set or an ordered sequence

    Returns:
        The matching source

    Raises:
        MisuseError: If the object is not a supported container
    """
    if isinstance(obj, IterableSource):
        return obj
    if isinstance(obj, str):
        return TextSource(obj)
    if isinstance(obj, Mapping):
        return MappingSource(obj)
    if isinstance(obj, Set):
        return SetSource(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, bytes):
        return SequenceSource(obj)
    logger.debug(f"No iterable capability for {type(obj).__name__}")
    raise MisuseError(f"{type(obj).__name__} object has no iterable capability")


def iterator(obj: Any) -> IteratorHandle:
    """Obtain a fresh handle from any supported source or container."""
    return as_source(obj).iterator()
