from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Union

from pysat.formula import CNF, WCNF

from simplesat.cnf.clause import Clause
from simplesat.cnf.clause_collection import ClauseCollection
from simplesat.cnf.cnf_io import cnf_lines, compute_top, wcnf_lines
from simplesat.cnf.dimacs import cnf_clause_line, wcnf_clause_line
from simplesat.core.errors import ValidationError
from simplesat.core.types import check_comment
from simplesat.proto.translator import LiteralTranslator

if TYPE_CHECKING:
    from simplesat.proto.encoding import ProtoEncoding

class SATEncoding:
    """
    The low level encoding of a problem instance: hard and soft clauses over
    signed DIMACS integers.
    """

    def __init__(self):
        self.literal_count: int = 0
        self.comments: List[str] = []
        self.hard: ClauseCollection[int] = ClauseCollection()
        self.soft: ClauseCollection[int] = ClauseCollection()

    @classmethod
    def from_proto(cls, proto: "ProtoEncoding", translator: Optional[LiteralTranslator] = None,
                   sort_literals: bool = False) -> "SATEncoding":
        """
        Translates a proto encoding. Clause comments keep their positions and the
        literal count covers every registered literal, even those that never
        appear in a clause.
        """
        if translator is None:
            translator = LiteralTranslator(proto, sort_literals=sort_literals)

        encoding = cls()
        encoding.comments = list(proto.comments)
        encoding.hard = ClauseCollection.with_comments_of(proto.hard)
        encoding.soft = ClauseCollection.with_comments_of(proto.soft)

        for clause in proto.hard.clauses():
            encoding.add_clause(translator.translate_clause(clause))
        for clause in proto.soft.clauses():
            encoding.add_clause(translator.translate_clause(clause))

        encoding.literal_count = max(encoding.literal_count, len(translator))
        return encoding

    @property
    def hard_count(self) -> int:
        return len(self.hard)

    @property
    def soft_count(self) -> int:
        return len(self.soft)

    @property
    def clause_count(self) -> int:
        return len(self.hard) + len(self.soft)

    # --- add ---

    def comment_general(self, comment: str) -> None:
        """Adds a comment at the top of the file."""
        self.comments.append(check_comment(comment))

    def comment_hard(self, comment: str) -> None:
        self.hard.comment(comment)

    def comment_soft(self, comment: str) -> None:
        self.soft.comment(comment)

    def add_hards(self, clauses: Iterable[Iterable[int]]) -> None:
        for clause in clauses:
            self.add_hard(*clause)

    def add_hard(self, *literals: int) -> None:
        """
        Adds a hard clause. Every variable up to the highest literal should occur in
        some clause, otherwise solvers may reject the file or answer incorrectly.
        """
        self.add_clause(Clause(0, literals))

    def add_soft(self, cost: int, *literals: int) -> None:
        self.add_clause(Clause.soft(cost, literals))

    def add_clauses(self, clauses: Iterable[Clause[int]]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def add_clause(self, clause: Clause[int]) -> None:
        for lit in clause.literals:
            if lit == 0:
                raise ValidationError("Clause literal cannot be 0")
            if abs(lit) > self.literal_count:
                self.literal_count = abs(lit)
        if clause.is_hard:
            self.hard.add(clause)
        else:
            self.soft.add(clause)

    # --- dimacs ---

    def top(self) -> int:
        """The WCNF hard clause weight: one more than the total soft cost."""
        return compute_top(self)

    def cnf_clause_line(self, clause: Clause[int], top: int) -> str:
        return cnf_clause_line(clause.literals)

    def wcnf_clause_line(self, clause: Clause[int], top: int) -> str:
        return wcnf_clause_line(clause.literals, top if clause.is_hard else clause.cost)

    def cnf_lines(self) -> Iterator[str]:
        return cnf_lines(self)

    def wcnf_lines(self) -> Iterator[str]:
        return wcnf_lines(self)

    def to_pysat(self) -> Union[CNF, WCNF]:
        """
        Converts to a PySAT formula: ``CNF`` when there are no soft clauses,
        ``WCNF`` otherwise.
        """
        if not self.soft_count:
            formula = CNF()
            for clause in self.hard.clauses():
                formula.append(list(clause.literals))
            formula.nv = self.literal_count
            return formula

        formula = WCNF()
        for clause in self.hard.clauses():
            formula.append(list(clause.literals))
        for clause in self.soft.clauses():
            formula.append(list(clause.literals), weight=clause.cost)
        formula.nv = self.literal_count
        return formula
