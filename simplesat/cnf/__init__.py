from simplesat.cnf.clause import Clause
from simplesat.cnf.clause_collection import ClauseCollection, Comment
from simplesat.cnf.dimacs import (
    cnf_clause_line, wcnf_clause_line, cnf_problem_line, wcnf_problem_line, comment_line
)
from simplesat.cnf.cnf_io import (
    compute_top, cnf_lines, wcnf_lines, to_dimacs_string, write_cnf, write_wcnf, write_encoding
)
from simplesat.cnf.sat_encoding import SATEncoding

__all__ = [
    "Clause", "ClauseCollection", "Comment",
    "cnf_clause_line", "wcnf_clause_line", "cnf_problem_line", "wcnf_problem_line", "comment_line",
    "compute_top", "cnf_lines", "wcnf_lines", "to_dimacs_string", "write_cnf", "write_wcnf", "write_encoding",
    "SATEncoding"
]
