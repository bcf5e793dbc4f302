from simplesat.solver.solution import Solution, SolutionStatus
from simplesat.solver.result import ProcessStatus, SolverResult, Times
from simplesat.solver.config import SolverConfig
from simplesat.solver.runner import SolverRunner, solve, solve_with_time_command

__all__ = [
    "Solution", "SolutionStatus",
    "ProcessStatus", "SolverResult", "Times",
    "SolverConfig",
    "SolverRunner", "solve", "solve_with_time_command"
]
