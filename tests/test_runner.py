import os
import time

import pytest

from simplesat.cnf import SATEncoding, write_encoding
from simplesat.core.types import SATFormat
from simplesat.solver import (
    ProcessStatus, SolutionStatus, SolverConfig, SolverRunner, solve, solve_with_time_command
)

pytestmark = pytest.mark.skipif(os.name != "posix", reason="fake solvers are shell scripts")

def _script(path, body):
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return str(path)

FAKE_TIME = """\
shift
shift
out="$1"
shift
printf 'real 1.50\\nuser 0.25\\nsys 0.10\\n' > "$out"
exec "$@"
"""

@pytest.fixture
def wcnf_file(tmp_path):
    enc = SATEncoding()
    enc.add_hard(1, 2)
    enc.add_soft(3, -1)
    path = tmp_path / "problem.wcnf"
    write_encoding(enc, path, SATFormat.WCNF_MAXSAT)
    return path

def _timing_files(directory):
    return list(directory.glob("time_output_*"))

def test_successful_run(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-maxsat", 'echo "c fake"\necho "s OPTIMUM FOUND"\necho "o 3"\necho "v 01"\n')
    result = solve(solver, wcnf_file, SATFormat.WCNF_MAXSAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.SUCCESS
    assert result.succeeded and result.solver_completed
    assert result.return_code == 0
    assert result.solution.status == SolutionStatus.OPTIMUM_FOUND
    assert result.solution.cost == 3
    assert result.solution.assignments == [False, True]
    assert result.times.real >= 0
    assert result.times.user == -1

def test_nonzero_exit_code_is_not_a_failure(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-sat", 'echo "s UNSATISFIABLE"\nexit 20\n')
    result = solve(solver, wcnf_file, SATFormat.CNF_SAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.SUCCESS
    assert result.return_code == 20
    assert result.solution.status == SolutionStatus.UNSATISFIABLE

def test_relative_paths_and_extra_args(tmp_path, wcnf_file):
    _script(tmp_path / "fake-args", 'echo "c args: $*"\necho "s UNSATISFIABLE"\necho "o 0"\n')
    config = SolverConfig(
        solver_path="./fake-args", working_directory=tmp_path, extra_args="--seed 3 --verbose"
    )
    result = SolverRunner(config).solve("problem.wcnf", SATFormat.WCNF_MAXSAT)
    assert result.status == ProcessStatus.SUCCESS
    assert f"c args: {tmp_path / 'problem.wcnf'} --seed 3 --verbose" in result.process_output

def test_unparsable_output(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-broken", 'echo "segmentation fault"\n')
    result = solve(solver, wcnf_file, SATFormat.WCNF_MAXSAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.ERROR_PARSING_OUTPUT
    assert result.solution is None
    assert result.process_output == "segmentation fault\n"
    assert result.error

def test_timeout_kills_solver(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-slow", "exec sleep 30\n")
    start = time.monotonic()
    result = solve(solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_limit_seconds=1, working_directory=tmp_path)
    elapsed = time.monotonic() - start
    assert result.status == ProcessStatus.TIMED_OUT
    assert result.solution is None
    assert not result.solver_completed
    assert elapsed < 15
    assert result.times.real >= 900

def test_timeout_kills_whole_process_group(tmp_path, wcnf_file):
    # The solver forks a child that keeps the output pipe open.
    solver = _script(tmp_path / "fake-forking", "sleep 30 &\nwait\n")
    start = time.monotonic()
    result = solve(solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_limit_seconds=1, working_directory=tmp_path)
    assert result.status == ProcessStatus.TIMED_OUT
    assert time.monotonic() - start < 15

def test_time_wrapper_reports_times(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-maxsat", 'echo "s OPTIMUM FOUND"\necho "o 0"\necho "v 11"\n')
    fake_time = _script(tmp_path / "fake-time", FAKE_TIME)
    result = solve_with_time_command(
        solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_binary=fake_time, working_directory=tmp_path
    )
    assert result.status == ProcessStatus.SUCCESS
    assert (result.times.real, result.times.user, result.times.sys) == (1500, 250, 100)
    assert result.solution.assignments == [True, True]
    assert _timing_files(tmp_path) == []

def test_time_wrapper_timeout_removes_timing_file(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-slow", "exec sleep 30\n")
    fake_time = _script(tmp_path / "fake-time", FAKE_TIME)
    result = solve_with_time_command(
        solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_limit_seconds=1, time_binary=fake_time,
        working_directory=tmp_path
    )
    assert result.status == ProcessStatus.TIMED_OUT
    assert _timing_files(tmp_path) == []

def test_existing_time_output_file_fails(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-maxsat", 'echo "s UNSATISFIABLE"\necho "o 0"\n')
    (tmp_path / "times.out").write_text("stale")
    result = solve_with_time_command(
        solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_binary="/usr/bin/time",
        time_output_path="times.out", working_directory=tmp_path
    )
    assert result.status == ProcessStatus.FAILED
    assert (tmp_path / "times.out").read_text() == "stale"

def test_missing_solver_fails(tmp_path, wcnf_file):
    result = solve("simplesat-no-such-solver", wcnf_file, SATFormat.WCNF_MAXSAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.FAILED
    assert "Could not find solver" in result.error
    result = solve(str(tmp_path / "missing"), wcnf_file, SATFormat.WCNF_MAXSAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.FAILED

def test_missing_input_fails(tmp_path):
    solver = _script(tmp_path / "fake-maxsat", 'echo "s UNSATISFIABLE"\n')
    result = solve(solver, tmp_path / "absent.cnf", SATFormat.CNF_SAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.FAILED
    assert "absent.cnf" in result.error

def test_custom_command(tmp_path):
    runner = SolverRunner(SolverConfig(solver_path="sh", working_directory=tmp_path))
    result = runner.solve_command(["sh", "-c", "echo 's OPTIMUM FOUND'; echo 'v 10'"], SATFormat.CNF_SAT)
    assert result.status == ProcessStatus.SUCCESS
    assert result.solution.assignments == [True, False]

def test_custom_command_not_found(tmp_path):
    runner = SolverRunner(SolverConfig(solver_path="sh", working_directory=tmp_path))
    result = runner.solve_command([str(tmp_path / "nope")], SATFormat.CNF_SAT)
    assert result.status == ProcessStatus.FAILED

def test_undecodable_output_is_a_parse_error(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-binary", "printf 's OPTIMUM FOUND\\nv \\377\\n'\n")
    result = solve(solver, wcnf_file, SATFormat.CNF_SAT, working_directory=tmp_path)
    assert result.status == ProcessStatus.ERROR_PARSING_OUTPUT
    assert "\ufffd" in result.process_output
    assert result.solution is None

def test_undecodable_custom_command(tmp_path):
    runner = SolverRunner(SolverConfig(solver_path="sh", working_directory=tmp_path))
    result = runner.solve_command(["sh", "-c", "printf '\\377\\376\\n'"], SATFormat.CNF_SAT)
    assert result.status == ProcessStatus.ERROR_PARSING_OUTPUT

def test_undecodable_timing_file(tmp_path, wcnf_file):
    solver = _script(tmp_path / "fake-maxsat", 'echo "s OPTIMUM FOUND"\necho "o 0"\necho "v 1"\n')
    fake_time = _script(tmp_path / "fake-time", FAKE_TIME.replace("printf '", "printf '\\377\\n"))
    result = solve_with_time_command(
        solver, wcnf_file, SATFormat.WCNF_MAXSAT, time_binary=fake_time, working_directory=tmp_path
    )
    assert result.status == ProcessStatus.SUCCESS
    assert (result.times.real, result.times.user, result.times.sys) == (1500, 250, 100)
