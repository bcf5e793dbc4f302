"""DIMACS CNF / WCNF line grammar."""
from typing import Iterable

HARD_HEADER = "Hard clauses"
SOFT_HEADER = "Soft clauses"

def cnf_clause_line(literals: Iterable[int]) -> str:
    return " ".join([*map(str, literals), "0"])

def wcnf_clause_line(literals: Iterable[int], cost: int) -> str:
    return " ".join([str(cost), *map(str, literals), "0"])

def cnf_problem_line(literal_count: int, clause_count: int) -> str:
    return f"p cnf {literal_count} {clause_count}"

def wcnf_problem_line(literal_count: int, clause_count: int, top: int) -> str:
    return f"p wcnf {literal_count} {clause_count} {top}"

def comment_line(comment: str) -> str:
    return f"c {comment}"
