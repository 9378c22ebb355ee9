"""Append-only per-step solver logs."""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, Protocol, TypeVar


class TraceStep(Protocol):
    """A recorded step knows how to flatten itself for serialization."""

    def to_dict(self) -> dict[str, Any]:
        ...


StepT = TypeVar("StepT", bound=TraceStep)


@dataclass
class Trace(Generic[StepT]):
    """
    Ordered log of immutable step records.

    Created empty by the caller and filled by a solver during one run.
    Each solver owns one concrete step type.
    """

    _steps: list[StepT] = field(default_factory=list)

    def record(self, step: StepT) -> None:
        self._steps.append(step)

    def clear(self) -> None:
        self._steps.clear()

    @property
    def steps(self) -> tuple[StepT, ...]:
        return tuple(self._steps)

    @property
    def last(self) -> Optional[StepT]:
        return self._steps[-1] if self._steps else None

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepT]:
        return iter(self._steps)

    def __getitem__(self, i: int) -> StepT:
        return self._steps[i]

    def to_records(self) -> list[dict[str, Any]]:
        """Steps as plain dicts, in recording order."""
        return [step.to_dict() for step in self._steps]
