"""Named decision variables whose values are rescaled before solving."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from .scaling import autorescale_vector


@dataclass(frozen=True)
class Variable(ABC):
    """A named vector of values, one value per alternative."""

    name: str
    values: tuple[float, ...] = field(default=())

    def __init__(self, name: str, values: Iterable[float]) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "values", tuple(float(x) for x in values))

    def __len__(self) -> int:
        return len(self.values)

    @abstractmethod
    def rescale(self) -> list[float]:
        """Return the values mapped onto the unit interval."""


class VariableAutoscale(Variable):
    """A variable whose smallest value is best: it maps to 0."""

    def rescale(self) -> list[float]:
        return autorescale_vector(self.values, inverted=False)


class VariableInvertedAutoscale(Variable):
    """A variable whose largest value is best: it maps to 0."""

    def rescale(self) -> list[float]:
        return autorescale_vector(self.values, inverted=True)