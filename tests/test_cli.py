import logging
import os

import pytest

from simplesat.cli import main
from simplesat.cnf import SATEncoding, write_encoding
from simplesat.core.logging import set_level
from simplesat.core.types import SATFormat

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SIMPLESAT_SOLVER", "SIMPLESAT_CONFIG_PATH", "SIMPLESAT_WORKDIR", "SIMPLESAT_TIME_LIMIT",
                 "SIMPLESAT_SOLVER_ARGS", "SIMPLESAT_TIME_BINARY"):
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def encoding():
    enc = SATEncoding()
    enc.add_hard(1, -2)
    enc.add_hard(2, 3)
    return enc

def test_info_cnf(tmp_path, encoding, capsys):
    path = tmp_path / "problem.cnf"
    write_encoding(encoding, path, SATFormat.CNF_SAT)
    assert main(["info", str(path)]) == 0
    assert "Format: cnf | Variables: 3 | Clauses: 2" in capsys.readouterr().out

def test_info_wcnf(tmp_path, encoding, capsys):
    encoding.add_soft(5, -3)
    path = tmp_path / "problem.wcnf"
    write_encoding(encoding, path, SATFormat.WCNF_MAXSAT)
    assert main(["info", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Format: wcnf" in out
    assert "Hard: 2 | Soft: 1" in out

def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "solve" in capsys.readouterr().out

def test_solve_without_solver(tmp_path, encoding, capsys):
    path = tmp_path / "problem.cnf"
    write_encoding(encoding, path, SATFormat.CNF_SAT)
    assert main(["solve", str(path)]) == 1
    assert "Error:" in capsys.readouterr().out

@pytest.mark.skipif(os.name != "posix", reason="fake solver is a shell script")
def test_solve_with_fake_solver(tmp_path, encoding, capsys):
    path = tmp_path / "problem.cnf"
    write_encoding(encoding, path, SATFormat.CNF_SAT)
    solver = tmp_path / "fake-sat"
    solver.write_text('#!/bin/sh\necho "s OPTIMUM FOUND"\necho "v 110"\n')
    solver.chmod(0o755)
    out_file = tmp_path / "answer.txt"

    code = main(["solve", str(path), "--solver", str(solver), "--workdir", str(tmp_path),
                 "--output", str(out_file)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Status: SUCCESS" in out
    assert "s OPTIMUM FOUND\nv 110" in out
    assert out_file.read_text() == "s OPTIMUM FOUND\nv 110\n"

@pytest.mark.skipif(os.name != "posix", reason="fake solver is a shell script")
def test_solve_reports_parse_errors(tmp_path, encoding, capsys):
    path = tmp_path / "problem.wcnf"
    write_encoding(encoding, path, SATFormat.WCNF_MAXSAT)
    solver = tmp_path / "fake-maxsat"
    solver.write_text('#!/bin/sh\necho "s OPTIMUM FOUND"\necho "v 110"\n')
    solver.chmod(0o755)

    # MaxSAT output needs an objective line
    assert main(["solve", str(path), "--solver", str(solver), "--workdir", str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "Status: ERROR_PARSING_OUTPUT" in out

def test_log_level_flag():
    assert main(["--log-level", "debug"]) == 0
    try:
        assert logging.getLogger("simplesat.cnf.cnf_io").level == logging.DEBUG
    finally:
        set_level("warning")
