from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from simplesat.cnf.clause import Clause
from simplesat.cnf.clause_collection import ClauseCollection
from simplesat.core.errors import CapacityError, ValidationError
from simplesat.core.types import MAX_VARIABLES, check_comment
from simplesat.proto.literal import Literal
from simplesat.proto.variables import (
    VariableFamily, Variable1D, Variable2D, Variable3D, VariableND
)

class ProtoEncoding:
    """
    A high level encoding over proto literals.

    Literals do not need explicit declaration: every literal obtained from a
    variable family is registered here, and the registered literals are what a
    ``LiteralTranslator`` numbers. Slightly less efficient than building a
    ``SATEncoding`` directly, but no integer bookkeeping is needed.
    """

    def __init__(self):
        # Per family registered literals; dicts keep first-registration order.
        self._variables: List[Dict[Literal, None]] = []
        self._names: List[Optional[str]] = []
        self.comments: List[str] = []
        self.hard: ClauseCollection[Literal] = ClauseCollection()
        self.soft: ClauseCollection[Literal] = ClauseCollection()

    # --- variables ---

    def new_variable(self, name: Optional[str] = None) -> int:
        """Allocates a new variable family id."""
        if len(self._variables) >= MAX_VARIABLES:
            raise CapacityError("Maximum variable count reached")
        self._variables.append({})
        self._names.append(name)
        return len(self._variables) - 1

    def new_family(self, *dim_sizes: Optional[int], symmetric: bool = False,
                   name: Optional[str] = None) -> VariableFamily:
        """
        Allocates a variable family shaped after ``dim_sizes``. Without sizes an open
        N-dimensional family is returned. The leading size may be ``None`` for an
        unbounded first dimension.
        """
        if symmetric and len(dim_sizes) != 2:
            raise ValidationError("Only 2D variables can be symmetric")
        if len(dim_sizes) == 0:
            return VariableND(self, name=name)
        if len(dim_sizes) == 1:
            return Variable1D(self, size=dim_sizes[0], name=name)
        if len(dim_sizes) == 2:
            return Variable2D(self, dim_sizes[0], dim_sizes[1], symmetric=symmetric, name=name)
        if len(dim_sizes) == 3:
            return Variable3D(self, *dim_sizes, name=name)
        return VariableND(self, sizes=dim_sizes, name=name)

    def variable_name(self, variable: int) -> Optional[str]:
        return self._names[variable]

    @property
    def variable_count(self) -> int:
        return len(self._variables)

    @property
    def literal_count(self) -> int:
        return sum(len(v) for v in self._variables)

    def literal(self, variable: int, index: int) -> Literal:
        """Returns a new literal and registers it."""
        lit = Literal(variable, index)
        self.register(lit)
        return lit

    def register(self, lit: Literal) -> bool:
        """
        Registers a literal for translation. Returns False if it was already known.
        """
        if lit.negated:
            raise ValidationError("Cannot register a negation of a literal")
        if lit.index < 0:
            raise ValidationError("Literal index cannot be negative")
        if lit.variable >= len(self._variables):
            raise ValidationError(f"Variable {lit.variable} has not been allocated")
        registered = self._variables[lit.variable]
        if lit in registered:
            return False
        registered[lit] = None
        return True

    def is_registered(self, lit: Literal) -> bool:
        return lit.variable < len(self._variables) and lit in self._variables[lit.variable]

    def registered_literals(self) -> Iterator[Tuple[Literal, ...]]:
        """Yields the registered literals of each family, in allocation order."""
        for registered in self._variables:
            yield tuple(registered)

    # --- clauses ---

    def add_hards(self, clauses: Iterable[Iterable[Literal]]) -> None:
        for clause in clauses:
            self.add_hard(*clause)

    def add_hard(self, *literals: Literal) -> None:
        self.add_clause(Clause(0, literals))

    def add_soft(self, cost: int, *literals: Literal) -> None:
        self.add_clause(Clause.soft(cost, literals))

    def add_clauses(self, clauses: Iterable[Clause[Literal]]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def add_clause(self, clause: Clause[Literal]) -> None:
        for lit in clause.literals:
            if not self.is_registered(lit):
                raise ValidationError(
                    f"Literal {lit} is not registered; obtain literals from a variable family"
                )
        if clause.is_hard:
            self.hard.add(clause)
        else:
            self.soft.add(clause)

    def comment_general(self, comment: str) -> None:
        """Adds a comment at the top of the file."""
        self.comments.append(check_comment(comment))

    def comment_hard(self, comment: str) -> None:
        """Adds a comment before the next hard clause."""
        self.hard.comment(comment)

    def comment_soft(self, comment: str) -> None:
        """Adds a comment before the next soft clause."""
        self.soft.comment(comment)

    # --- readable rendering ---

    def cnf_clause_line(self, clause: Clause[Literal], top: int) -> str:
        return " ".join(lit.display() for lit in clause.literals)

    def wcnf_clause_line(self, clause: Clause[Literal], top: int) -> str:
        kind = "HARD" if clause.is_hard else f"SOFT {clause.cost}"
        return f"{kind}: {' '.join(lit.display() for lit in clause.literals)}"
