"""
DIMACS writers.

Both ``SATEncoding`` and ``ProtoEncoding`` can be written; the encoding decides
how its clauses are rendered through ``cnf_clause_line`` / ``wcnf_clause_line``
(integers for the former, readable literal names for the latter).
"""
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from simplesat.cnf.dimacs import (
    HARD_HEADER, SOFT_HEADER, cnf_problem_line, comment_line, wcnf_problem_line
)
from simplesat.core.errors import CNFError
from simplesat.core.logging import get_logger
from simplesat.core.serialization import atomic_write_lines
from simplesat.core.types import SATFormat

logger = get_logger(__name__)

def compute_top(encoding: Any) -> int:
    """One more than the sum of all soft clause costs."""
    return 1 + sum(clause.cost for clause in encoding.soft.clauses())

def cnf_lines(encoding: Any, literal_count: Optional[int] = None) -> Iterator[str]:
    """Returns the lines of a CNF file. Fails right away if the encoding has soft clauses."""
    if len(encoding.soft) > 0:
        raise CNFError("Can't convert to CNF if there are soft clauses. Convert to MaxSAT WCNF form instead.")
    if literal_count is None:
        literal_count = encoding.literal_count
    return _cnf_lines(encoding, literal_count)

def _cnf_lines(encoding: Any, literal_count: int) -> Iterator[str]:
    for comment in encoding.comments:
        yield comment_line(comment)
    yield cnf_problem_line(literal_count, len(encoding.hard))
    yield comment_line(HARD_HEADER)
    yield from encoding.hard.lines_of(lambda clause: encoding.cnf_clause_line(clause, 0))

def wcnf_lines(encoding: Any, literal_count: Optional[int] = None, top: Optional[int] = None) -> Iterator[str]:
    """Yields the lines of a WCNF file. Hard clauses are weighted with ``top``."""
    if literal_count is None:
        literal_count = encoding.literal_count
    if top is None:
        top = compute_top(encoding)

    def clause_format(clause):
        return encoding.wcnf_clause_line(clause, top)

    for comment in encoding.comments:
        yield comment_line(comment)
    yield wcnf_problem_line(literal_count, len(encoding.hard) + len(encoding.soft), top)
    yield comment_line(HARD_HEADER)
    yield from encoding.hard.lines_of(clause_format)
    yield comment_line(SOFT_HEADER)
    yield from encoding.soft.lines_of(clause_format)

def to_dimacs_string(encoding: Any, format: SATFormat = SATFormat.CNF_SAT) -> str:
    """Renders the whole file in memory, each line newline terminated."""
    lines = cnf_lines(encoding) if SATFormat(format) == SATFormat.CNF_SAT else wcnf_lines(encoding)
    return "".join(line + "\n" for line in lines)

def write_cnf(encoding: Any, path: Union[str, Path], literal_count: Optional[int] = None) -> None:
    atomic_write_lines(path, cnf_lines(encoding, literal_count))
    logger.debug(f"Wrote CNF with {len(encoding.hard)} clauses to {path}")

def write_wcnf(encoding: Any, path: Union[str, Path], literal_count: Optional[int] = None,
               top: Optional[int] = None) -> None:
    atomic_write_lines(path, wcnf_lines(encoding, literal_count, top))
    logger.debug(f"Wrote WCNF with {len(encoding.hard)} hard and {len(encoding.soft)} soft clauses to {path}")

def write_encoding(encoding: Any, path: Union[str, Path], format: SATFormat) -> None:
    if SATFormat(format) == SATFormat.CNF_SAT:
        write_cnf(encoding, path)
    else:
        write_wcnf(encoding, path)
