"""Tests for main module."""

import logging

from lazyseq.config import LazySeqConfig
from lazyseq.main import compare_memory, main, setup_logging


def test_main_runs_walkthrough(monkeypatch):
    """Test that the walkthrough completes successfully."""
    monkeypatch.setenv("LAZYSEQ_TAKE_LIMIT", "3")
    assert main() == 0


def test_main_reports_bad_configuration(monkeypatch):
    """Test that configuration errors become a failing exit code."""
    monkeypatch.setenv("LAZYSEQ_TAKE_LIMIT", "0")
    assert main() == 1


def test_compare_memory():
    """Test that the lazy and eager runs agree on their result."""
    stats = compare_memory(LazySeqConfig(take_limit=3))
    assert stats["lazy"]["result"] == [1, 2, 3]
    assert stats["eager"]["result"] == [1, 2, 3]


def test_setup_logging_levels():
    """Test switching verbose logging on and off."""
    setup_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG
    setup_logging(verbose=False)
    assert logging.getLogger().level == logging.INFO
