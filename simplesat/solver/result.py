from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from simplesat.solver.solution import Solution

class ProcessStatus(str, Enum):
    SUCCESS = "SUCCESS"
    TIMED_OUT = "TIMED_OUT"
    ERROR_PARSING_OUTPUT = "ERROR_PARSING_OUTPUT"
    FAILED = "FAILED"

class Times(BaseModel):
    """Process times in milliseconds, -1 where unknown."""
    real: int = -1
    user: int = -1
    sys: int = -1

    @classmethod
    def parse(cls, time_output: str) -> "Times":
        """Parses the portable output of ``time -p`` (``real 1.23`` etc.)."""
        values = {}
        for line in time_output.split("\n"):
            parts = line.split()
            if len(parts) == 2 and parts[0] in ("real", "user", "sys"):
                try:
                    values[parts[0]] = int(float(parts[1]) * 1000)
                except ValueError:
                    continue
        return cls(**values)

class SolverResult(BaseModel):
    """Outcome of one solver invocation. Never raised, always returned."""
    status: ProcessStatus
    process_output: str = ""
    times: Times = Field(default_factory=Times)
    # True if the process exited on its own before the deadline.
    solver_completed: bool = False
    solution: Optional[Solution] = None
    return_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == ProcessStatus.SUCCESS
