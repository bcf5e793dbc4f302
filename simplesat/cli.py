import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pysat.formula import CNF, WCNF

from simplesat.core.errors import SimpleSATError
from simplesat.core.logging import set_level
from simplesat.core.serialization import atomic_write_text
from simplesat.core.types import SATFormat
from simplesat.solver.config import SolverConfig
from simplesat.solver.result import ProcessStatus
from simplesat.solver.runner import SolverRunner

def _guess_format(path: Path) -> SATFormat:
    return SATFormat.WCNF_MAXSAT if path.suffix.lower() == ".wcnf" else SATFormat.CNF_SAT

def handle_solve(args) -> int:
    cnf_file = Path(args.cnf_file)
    format = SATFormat(args.format) if args.format else _guess_format(cnf_file)
    config = SolverConfig.from_env_or_file(
        solver_path=args.solver,
        working_directory=args.workdir,
        time_limit_seconds=args.timeout,
        extra_args=args.arg,
        time_binary=args.time_binary,
    )
    result = SolverRunner(config).solve(cnf_file, format)

    print(f"Status: {result.status.value}")
    print(f"Times (ms): real={result.times.real} user={result.times.user} sys={result.times.sys}")
    if result.error:
        print(f"Error: {result.error}")
    if result.solution is not None:
        print(result.solution.to_output())
        if args.output:
            atomic_write_text(Path(args.output), result.solution.to_output() + "\n")
    return 0 if result.status == ProcessStatus.SUCCESS else 1

def handle_info(args) -> int:
    path = Path(args.cnf_file)
    format = SATFormat(args.format) if args.format else _guess_format(path)
    if format == SATFormat.CNF_SAT:
        formula = CNF(from_file=str(path))
        print(f"Format: cnf | Variables: {formula.nv} | Clauses: {len(formula.clauses)}")
    else:
        formula = WCNF(from_file=str(path))
        print(f"Format: wcnf | Variables: {formula.nv} | Hard: {len(formula.hard)} | "
              f"Soft: {len(formula.soft)} | Top: {formula.topw}")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="SimpleSAT CLI - Run SAT/MaxSAT solvers on DIMACS files.")
    parser.add_argument("--log-level", type=str, help="Log level (default: $SIMPLESAT_LOG_LEVEL or WARNING).")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # solve
    solve_parser = subparsers.add_parser("solve", help="Run a solver on a CNF/WCNF file.")
    solve_parser.add_argument("cnf_file", type=str, help="Path to the .cnf or .wcnf file.")
    solve_parser.add_argument("--solver", type=str, help="Solver binary (default: $SIMPLESAT_SOLVER).")
    solve_parser.add_argument("--format", choices=[f.value for f in SATFormat],
                              help="Input format (default: from the file extension).")
    solve_parser.add_argument("--timeout", type=float, help="Wall clock limit in seconds (0 = none).")
    solve_parser.add_argument("--workdir", type=str, help="Working directory of the solver process.")
    solve_parser.add_argument("--time-binary", type=str, help="Measure times with e.g. /usr/bin/time.")
    solve_parser.add_argument("--arg", action="append", help="Extra solver argument (repeatable).")
    solve_parser.add_argument("--output", type=str, help="Write the decoded solution to this file.")
    solve_parser.set_defaults(func=handle_solve)

    # info
    info_parser = subparsers.add_parser("info", help="Summarize a CNF/WCNF file.")
    info_parser.add_argument("cnf_file", type=str, help="Path to the .cnf or .wcnf file.")
    info_parser.add_argument("--format", choices=[f.value for f in SATFormat],
                             help="Input format (default: from the file extension).")
    info_parser.set_defaults(func=handle_info)

    args = parser.parse_args(argv)
    if args.log_level:
        set_level(args.log_level)
    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (SimpleSATError, OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
