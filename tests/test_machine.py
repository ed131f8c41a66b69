"""Tests for machine module."""

import pytest

from lazyseq.sequence import (
    ENTRY_POINT,
    EXHAUSTED,
    NO_VALUE,
    ComputationError,
    CoroutineStatus,
    Delegate,
    Finish,
    MisuseError,
    Produced,
    SegmentedCoroutine,
    Suspend,
    drain_all,
    take,
)


class Countdown(SegmentedCoroutine):
    def start(self, n):
        return {"n": n}

    def resume(self, point, local, sent):
        if local.n == 0:
            return Finish("liftoff")
        value = local.n
        local.n -= 1
        return Suspend(value)


class Splice(SegmentedCoroutine):
    def resume(self, point, local, sent):
        if point == ENTRY_POINT:
            return Delegate(["a", "b"], resume_at=1)
        if point == 1:
            return Delegate(["c"], resume_at=2)
        if point == 2:
            return Suspend("d", resume_at=3)
        return Finish()


class Accumulator(SegmentedCoroutine):
    infinite = True

    def start(self):
        return {"total": 0}

    def resume(self, point, local, sent):
        if sent is not NO_VALUE:
            local.total += sent
        return Suspend(local.total)


def test_segmented_countdown():
    """Test a finite machine runs to Finish and keeps its return value."""
    machine = Countdown(3)
    assert machine.status is CoroutineStatus.NOT_STARTED
    assert drain_all(machine) == [3, 2, 1]
    assert machine.return_value == "liftoff"
    assert machine.status is CoroutineStatus.COMPLETED
    assert machine.step() is EXHAUSTED


def test_bindings_persist_between_segments():
    """Test that the bindings record reflects the state at each suspension."""
    machine = Countdown(3)
    assert machine.locals == {"n": 3}
    machine.step()
    assert machine.locals == {"n": 2}
    machine.step()
    assert machine.locals == {"n": 1}


def test_suspension_point_defaults_to_current_segment():
    """Test that Suspend without resume_at loops on the same segment."""
    machine = Countdown(2)
    machine.step()
    assert machine.suspended_at == ENTRY_POINT


def test_segmented_delegation_ordering():
    """Test that Delegate transitions splice children before the parent continues."""
    machine = Splice()
    assert drain_all(machine) == ["a", "b", "c", "d"]


def test_segmented_delegation_resumes_at_next_segment():
    """Test that the parent resumes at the segment named by the delegation."""
    machine = Splice()
    take(machine, 2)
    assert machine.suspended_at == 1
    machine.step()
    assert machine.suspended_at == 2
    machine.step()
    assert machine.suspended_at == 3


def test_resume_values():
    """Test two-way communication with a segmented machine."""
    machine = Accumulator()
    assert machine.step(100) == Produced(0)
    assert machine.step(5) == Produced(5)
    assert machine.step(2) == Produced(7)
    assert machine.step() == Produced(7)


def test_infinite_machine_refuses_drain():
    """Test that machines declared infinite cannot be drained."""
    machine = Accumulator()
    assert machine.unbounded is True
    with pytest.raises(MisuseError):
        drain_all(machine)
    assert machine.status is CoroutineStatus.NOT_STARTED


def test_segment_error_becomes_computation_error():
    """Test that a failing segment completes the machine."""

    class Divider(SegmentedCoroutine):
        def start(self, divisor):
            return {"divisor": divisor}

        def resume(self, point, local, sent):
            return Suspend(1 / local.divisor)

    machine = Divider(0)
    with pytest.raises(ComputationError) as exc_info:
        machine.step()
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
    assert machine.status is CoroutineStatus.COMPLETED
    assert machine.step() is EXHAUSTED
    assert machine.locals == {}


def test_unknown_transition_is_rejected():
    """Test that segments must end in Suspend, Delegate or Finish."""

    class Broken(SegmentedCoroutine):
        def resume(self, point, local, sent):
            return 42

    with pytest.raises(ComputationError) as exc_info:
        Broken().step()
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_default_start_takes_no_arguments():
    """Test that a machine without start() rejects invocation arguments."""
    with pytest.raises(TypeError):
        Splice("unexpected")


def test_source_builds_independent_machines():
    """Test that source() manufactures a fresh machine per iterator."""
    source = Countdown.source(2)
    first = source.iterator()
    second = source.iterator()
    assert drain_all(first) == [2, 1]
    assert drain_all(second) == [2, 1]
    assert Accumulator.source().unbounded is True


def test_name_defaults_to_class_name():
    """Test that machines are named after their class."""
    assert Countdown(1).name == "Countdown"
    assert Countdown(1, name="launch").name == "launch"
