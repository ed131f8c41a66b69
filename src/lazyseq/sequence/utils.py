"""Instrumentation for stepping and memory usage."""

import gc
import logging
import os
import time
import tracemalloc
from typing import Any, Callable, Dict, Optional

import psutil

from .interfaces import IteratorHandle
from .models import NO_VALUE, StepResult
from .protocols import LoggerProtocol


class StepCounter(IteratorHandle):
    """
    Counts the steps taken through a handle.

    Single Responsibility: observe traffic on a handle without changing it.
    """

    def __init__(self, inner: IteratorHandle):
        self._inner = inner
        self.steps = 0
        self.produced = 0

    @property
    def unbounded(self) -> bool:
        return self._inner.unbounded

    def step(self, resume: Any = NO_VALUE) -> StepResult:
        self.steps += 1
        result = self._inner.step(resume)
        if not result.exhausted:
            self.produced += 1
        return result


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Single Responsibility: Track and report memory statistics.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize memory profiler.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], Any]) -> Dict[str, Any]:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Function to execute

        Returns:
            Dictionary with memory statistics and the operation's result
        """
        gc.collect()

        tracemalloc.start()
        start_time = time.time()
        try:
            result = operation_func()
            elapsed_time = time.time() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        stats = {
            "operation": operation_name,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": process.memory_info().rss,
            "result": result,
        }

        self._logger.debug(
            f"{operation_name}: peak {format_bytes(peak_mem)} in {elapsed_time:.4f} seconds"
        )
        return stats


def format_bytes(bytes_value: float) -> str:
    """Format bytes to human-readable format."""
    for unit in ["B", "KB", "MB", "GB"]:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} TB"
