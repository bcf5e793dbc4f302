"""
SimpleSAT: build SAT / MaxSAT encodings over named literals, write them as
DIMACS CNF / WCNF, run an external solver and decode its answer.
"""
from simplesat.core.types import SATFormat
from simplesat.proto import Literal, LiteralTranslator, ProtoEncoding
from simplesat.cnf import Clause, ClauseCollection, SATEncoding, write_cnf, write_wcnf, write_encoding
from simplesat.solver import (
    ProcessStatus, Solution, SolutionStatus, SolverConfig, SolverResult, SolverRunner, Times,
    solve, solve_with_time_command
)

__all__ = [
    "SATFormat",
    "Literal", "LiteralTranslator", "ProtoEncoding",
    "Clause", "ClauseCollection", "SATEncoding", "write_cnf", "write_wcnf", "write_encoding",
    "ProcessStatus", "Solution", "SolutionStatus", "SolverConfig", "SolverResult", "SolverRunner", "Times",
    "solve", "solve_with_time_command"
]
