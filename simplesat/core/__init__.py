"""
Core module for SimpleSAT.
Provides error handling, logging, shared types and serialization.
"""
from simplesat.core.errors import (
    SimpleSATError, ValidationError, CapacityError, CNFError, TranslationError,
    CoordinateError, SolutionParseError, SolverError
)
from simplesat.core.logging import get_logger, set_level
from simplesat.core.types import MAX_VARIABLES, SATFormat, check_comment
from simplesat.core.serialization import atomic_write_lines, atomic_write_text, safe_mkdir, read_text, read_json

__all__ = [
    "SimpleSATError", "ValidationError", "CapacityError", "CNFError", "TranslationError",
    "CoordinateError", "SolutionParseError", "SolverError",
    "get_logger", "set_level",
    "MAX_VARIABLES", "SATFormat", "check_comment",
    "atomic_write_lines", "atomic_write_text", "safe_mkdir", "read_text", "read_json"
]
