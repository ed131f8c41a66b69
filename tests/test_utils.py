"""Tests for utils module."""

from lazyseq.sequence import StepCounter, iterator
from lazyseq.sequence.utils import MemoryProfiler, format_bytes


def test_step_counter_counts_steps_and_values():
    """Test that the counter sees every step, including exhausted ones."""
    counter = StepCounter(iterator([1, 2]))
    assert list(counter) == [1, 2]
    assert counter.steps == 3
    assert counter.produced == 2


def test_memory_profiler_returns_statistics():
    """Test profiling an operation."""
    profiler = MemoryProfiler()
    stats = profiler.profile("build list", lambda: list(range(1000)))

    assert stats["operation"] == "build list"
    assert stats["result"] == list(range(1000))
    assert stats["peak_memory"] > 0
    assert stats["rss"] > 0
    assert stats["elapsed_time"] >= 0


def test_format_bytes():
    """Test human-readable byte formatting."""
    assert format_bytes(512) == "512.00 B"
    assert format_bytes(2048) == "2.00 KB"
    assert format_bytes(3 * 1024 * 1024) == "3.00 MB"
