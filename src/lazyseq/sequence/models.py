"""Data models for iteration steps and coroutine state."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class _NoValue:
    """Type of the NO_VALUE sentinel."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


class StepResult:
    """Base class for the outcome of a single ``step()`` call."""

    exhausted: bool = False


@dataclass(frozen=True)
class Produced(StepResult):
    """A value was produced; more may follow."""

    value: Any


class _Exhausted(StepResult):
    """The sequence has no more values."""

    exhausted = True
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED = _Exhausted()


class CoroutineStatus(str, Enum):
    """Lifecycle status of a coroutine."""

    NOT_STARTED = "not_started"
    SUSPENDED = "suspended"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class Bindings:
    """Live local variables of a segmented coroutine between suspensions."""

    values: Dict[str, Any]

    def __getattr__(self, name: str) -> Any:
        try:
            return self.__dict__["values"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "values":
            super().__setattr__(name, value)
        else:
            self.values[name] = value

    def to_dict(self) -> Dict[str, Any]:
        """Return a copy of the bindings."""
        return dict(self.values)


@dataclass(frozen=True)
class Suspend:
    """Transition: pause and hand ``value`` to the caller."""

    value: Any
    resume_at: Optional[int] = None


@dataclass(frozen=True)
class Finish:
    """Transition: the body ran to its end, optionally returning a value."""

    value: Any = None


@dataclass(frozen=True)
class Delegate:
    """Transition: forward every step to ``source`` until it is exhausted."""

    source: Any
    resume_at: Optional[int] = None


Transition = Union[Suspend, Finish, Delegate]
