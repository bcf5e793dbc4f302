"""
Runs an external SAT / MaxSAT solver on a DIMACS file and decodes its answer.

Process and parsing problems never propagate out of ``SolverRunner.solve``;
they are reported through ``SolverResult.status``.
"""
import os
import shutil
import signal
import subprocess
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from simplesat.core.errors import SolutionParseError, SolverError
from simplesat.core.logging import get_logger
from simplesat.core.serialization import read_text
from simplesat.core.types import SATFormat
from simplesat.solver.config import SolverConfig
from simplesat.solver.result import ProcessStatus, SolverResult, Times
from simplesat.solver.solution import Solution

logger = get_logger(__name__)

def _kill(proc: subprocess.Popen) -> None:
    """Kills the process together with anything it spawned (e.g. the solver under `time`)."""
    if os.name == "posix":
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
    else:
        proc.kill()

@contextmanager
def _solver_process(argv: List[str], cwd: Path, timing_path: Optional[Path]) -> Iterator[subprocess.Popen]:
    """
    Starts the solver with captured output. On exit the process is killed if still
    running, its pipes are closed and the timing file is removed, whatever happened.
    """
    try:
        with subprocess.Popen(
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            # Undecodable bytes become U+FFFD and fail parsing instead of raising.
            errors="replace",
            start_new_session=(os.name == "posix"),
        ) as proc:
            try:
                yield proc
            finally:
                if proc.poll() is None:
                    _kill(proc)
                    proc.communicate()
    finally:
        if timing_path is not None:
            timing_path.unlink(missing_ok=True)

class SolverRunner:
    """
    Launches a solver binary against a CNF/WCNF file.

    Only one child process exists per call. With a time limit the call blocks at
    most that long before the process group is killed and ``TIMED_OUT`` is
    returned; no partial output is kept in that case. No retries are made.
    """

    def __init__(self, config: SolverConfig):
        self.config = config

    def solve(self, cnf_path: Union[str, Path], format: SATFormat) -> SolverResult:
        format = SATFormat(format)
        try:
            solver = self._resolve_solver()
            cnf_file = self.config.resolve(cnf_path)
            if not cnf_file.exists():
                raise SolverError(f"Could not find input file: {cnf_file}")
            timing_path = self._timing_file() if self.config.time_binary else None
        except (SolverError, OSError) as e:
            logger.error(f"Solver not started: {e}")
            return SolverResult(status=ProcessStatus.FAILED, error=str(e))

        argv = [solver, str(cnf_file), *self.config.extra_args]
        if timing_path is not None:
            argv = [self.config.time_binary, "-p", "-o", str(timing_path), *argv]
        return self._execute(argv, format, timing_path)

    def solve_command(self, argv: Sequence[str], format: SATFormat) -> SolverResult:
        """Runs a fully custom command line that prints solver output on stdout."""
        return self._execute(list(argv), SATFormat(format), None)

    def _resolve_solver(self) -> str:
        solver = self.config.solver_path
        if os.sep in solver or (os.altsep and os.altsep in solver):
            path = self.config.resolve(solver)
            if not path.is_file():
                raise SolverError(f"Could not find solver: {solver}")
            return str(path.absolute())
        found = shutil.which(solver)
        if found is None:
            raise SolverError(f"Could not find solver: {solver}")
        return found

    def _timing_file(self) -> Path:
        if self.config.time_output_path:
            path = self.config.resolve(self.config.time_output_path)
            if path.exists():
                raise SolverError(f"Time output file exists: {path}")
            return path
        fd, name = tempfile.mkstemp(prefix="time_output_", suffix=".out", dir=self.config.working_directory)
        os.close(fd)
        return Path(name)

    def _execute(self, argv: List[str], format: SATFormat, timing_path: Optional[Path]) -> SolverResult:
        limit = self.config.time_limit_seconds or None
        logger.info(f"Running solver: {' '.join(argv)} (time limit: {limit or 'none'})")

        try:
            with _solver_process(argv, self.config.working_directory, timing_path) as proc:
                start = time.perf_counter()
                try:
                    output, errors = proc.communicate(timeout=limit)
                except subprocess.TimeoutExpired:
                    _kill(proc)
                    proc.communicate()
                    real_ms = int((time.perf_counter() - start) * 1000)
                    logger.warning(f"Solver exceeded the time limit of {limit}s and was killed")
                    return SolverResult(status=ProcessStatus.TIMED_OUT, times=Times(real=real_ms))
                real_ms = int((time.perf_counter() - start) * 1000)

                timing_output = ""
                if timing_path is not None and timing_path.exists():
                    timing_output = read_text(timing_path, errors="replace")
        except OSError as e:
            logger.error(f"Could not run solver {argv[0]}: {e}")
            return SolverResult(status=ProcessStatus.FAILED, error=str(e))

        logger.debug(f"Solver output:\n{output}")
        if errors:
            logger.debug(f"Solver stderr:\n{errors}")

        times = Times.parse(timing_output) if timing_output else Times(real=real_ms)
        result = SolverResult(
            status=ProcessStatus.SUCCESS,
            process_output=output,
            times=times,
            solver_completed=True,
            return_code=proc.returncode,
        )
        try:
            result.solution = Solution.parse(format, output)
        except SolutionParseError as e:
            logger.warning(f"Error parsing solver output: {e}")
            result.status = ProcessStatus.ERROR_PARSING_OUTPUT
            result.error = str(e)
        return result

def solve(solver_path: str, cnf_path: Union[str, Path], format: SATFormat, time_limit_seconds: float = 0,
          extra_args: Union[str, Sequence[str], None] = None,
          working_directory: Union[str, Path] = ".") -> SolverResult:
    """Solves a DIMACS file with the given solver binary."""
    config = SolverConfig(
        solver_path=solver_path,
        working_directory=Path(working_directory),
        time_limit_seconds=time_limit_seconds,
        extra_args=extra_args,
    )
    return SolverRunner(config).solve(cnf_path, format)

def solve_with_time_command(solver_path: str, cnf_path: Union[str, Path], format: SATFormat,
                            time_limit_seconds: float = 0,
                            extra_args: Union[str, Sequence[str], None] = None,
                            time_binary: str = "/usr/bin/time",
                            time_output_path: Optional[str] = None,
                            working_directory: Union[str, Path] = ".") -> SolverResult:
    """Like ``solve`` but measures real/user/sys time with an external ``time`` binary."""
    config = SolverConfig(
        solver_path=solver_path,
        working_directory=Path(working_directory),
        time_limit_seconds=time_limit_seconds,
        extra_args=extra_args,
        time_binary=time_binary,
        time_output_path=time_output_path,
    )
    return SolverRunner(config).solve(cnf_path, format)
