from dataclasses import dataclass
from typing import Generic, Iterable, Tuple, TypeVar

from simplesat.core.errors import ValidationError

T = TypeVar("T")

@dataclass(frozen=True)
class Clause(Generic[T]):
    """
    A clause and its violation cost. A cost of 0 marks a hard clause.
    The literal type is either a proto ``Literal`` or a signed DIMACS integer.
    """
    cost: int
    literals: Tuple[T, ...]

    def __post_init__(self):
        if self.cost < 0:
            raise ValidationError(f"Clause cost cannot be negative, got {self.cost}")
        if not isinstance(self.literals, tuple):
            object.__setattr__(self, "literals", tuple(self.literals))

    @property
    def is_hard(self) -> bool:
        return self.cost == 0

    @classmethod
    def hard(cls, literals: Iterable[T]) -> "Clause[T]":
        return cls(0, tuple(literals))

    @classmethod
    def soft(cls, cost: int, literals: Iterable[T]) -> "Clause[T]":
        if cost <= 0:
            raise ValidationError(f"Soft clauses need a positive cost, got {cost}")
        return cls(cost, tuple(literals))

    def __len__(self) -> int:
        return len(self.literals)
