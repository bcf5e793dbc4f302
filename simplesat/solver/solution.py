from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from simplesat.core.errors import SolutionParseError
from simplesat.core.types import SATFormat
from simplesat.proto.literal import Literal
from simplesat.proto.translator import LiteralTranslator

class SolutionStatus(str, Enum):
    OPTIMUM_FOUND = "OPTIMUM FOUND"
    UNSATISFIABLE = "UNSATISFIABLE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_line(cls, text: str) -> "SolutionStatus":
        if text == cls.OPTIMUM_FOUND.value:
            return cls.OPTIMUM_FOUND
        if text == cls.UNSATISFIABLE.value:
            return cls.UNSATISFIABLE
        return cls.UNKNOWN

class Solution(BaseModel):
    """
    The answer of a solver using the ``s`` / ``o`` / ``v`` line format, where the
    ``v`` line is a bitstring with one character per DIMACS variable.
    """
    format: SATFormat
    status: SolutionStatus
    cost: int = Field(default=0, ge=0)
    # Position i holds the value of DIMACS variable i + 1.
    assignments: List[bool] = Field(default_factory=list)

    @classmethod
    def parse(cls, format: SATFormat, solver_output: str) -> "Solution":
        """
        Parses the standard output of a solver.

        The ``o`` line is only read (and required) for WCNF MaxSAT output. When
        several ``o`` lines are present the lowest cost is kept.
        """
        format = SATFormat(format)
        status_text: Optional[str] = None
        values_row = ""
        cost: Optional[int] = None

        for line in solver_output.split("\n"):
            line = line.rstrip("\r")
            if not line:
                continue
            if line.startswith("s "):
                status_text = line[2:].strip()
            elif line.startswith("v "):
                values_row = line[2:].strip()
            elif format == SATFormat.WCNF_MAXSAT and line.startswith("o "):
                try:
                    value = int(line[2:].strip())
                except ValueError:
                    raise SolutionParseError(f"Invalid solution: bad objective line {line!r}") from None
                if value < 0:
                    raise SolutionParseError(f"Invalid solution: negative objective {value}")
                cost = value if cost is None else min(cost, value)

        if not solver_output or not status_text:
            raise SolutionParseError("Invalid solution: no status line")
        if format == SATFormat.WCNF_MAXSAT and cost is None:
            raise SolutionParseError("Invalid solution: no objective line")

        status = SolutionStatus.from_line(status_text)
        assignments: List[bool] = []
        if status == SolutionStatus.OPTIMUM_FOUND:
            if values_row.strip("01"):
                raise SolutionParseError(f"Invalid solution: assignment is not a bitstring: {values_row!r}")
            assignments = [c == "1" for c in values_row]

        return cls(format=format, status=status, cost=cost or 0, assignments=assignments)

    def as_literals(self, translator: LiteralTranslator) -> List[Literal]:
        """The assignment as proto literals, negated where the variable is false."""
        literals = []
        for i, value in enumerate(self.assignments):
            lit = translator.literal_of(i + 1)
            literals.append(lit if value else lit.neg)
        return literals

    def value_of(self, literal: Literal, translator: LiteralTranslator) -> bool:
        """Truth value of a (possibly negated) literal under this assignment."""
        position = translator.value_of(literal) - 1
        if position >= len(self.assignments):
            raise SolutionParseError(
                f"No value for {literal} in a {self.status.value} solution "
                f"with {len(self.assignments)} assigned variables"
            )
        value = self.assignments[position]
        return not value if literal.negated else value

    def to_output(self) -> str:
        lines = [f"s {self.status.value}"]
        if self.format == SATFormat.WCNF_MAXSAT:
            lines.append(f"o {self.cost}")
        lines.append("v " + "".join("1" if value else "0" for value in self.assignments))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_output()
