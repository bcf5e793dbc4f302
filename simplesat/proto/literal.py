import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from simplesat.core.errors import CapacityError
from simplesat.core.types import MAX_VARIABLES

@dataclass(frozen=True)
class Literal:
    """
    A literal which does not have a DIMACS number yet.

    A literal is identified by the variable family it belongs to and its index
    within that family. Polarity and display name are carried along but are not
    part of its identity, so ``lit == lit.neg`` holds and both hash alike.
    """
    variable: int
    index: int
    negated: bool = field(default=False, compare=False)
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not 0 <= self.variable < MAX_VARIABLES:
            raise CapacityError(
                f"Current model supports up to {MAX_VARIABLES} variable families in an encoding, "
                f"got variable {self.variable}"
            )

    @property
    def neg(self) -> "Literal":
        """The negation of this literal."""
        if self.negated:
            return self
        return dataclasses.replace(self, negated=True)

    @property
    def pos(self) -> "Literal":
        """The non-negated form of this literal."""
        if not self.negated:
            return self
        return dataclasses.replace(self, negated=False)

    def __neg__(self) -> "Literal":
        return dataclasses.replace(self, negated=not self.negated)

    def named(self, name: Optional[str], *coords: Any) -> "Literal":
        if not name:
            return self
        if not coords:
            return dataclasses.replace(self, name=name)
        return dataclasses.replace(self, name=f"{name}[{', '.join(str(c) for c in coords)}]")

    def display(self, positive_sign: bool = False) -> str:
        if self.name is None:
            return str(self)
        sign = "-" if self.negated else ("+" if positive_sign else "")
        return f"{sign}{self.name}"

    def __str__(self) -> str:
        return f"({self.variable}, {self.index}, neg={self.negated})"
