import os
import shlex
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from simplesat.core.errors import SolverError
from simplesat.core.serialization import read_json

class SolverConfig(BaseModel):
    """Configuration of the external solver process."""
    solver_path: str
    # Relative solver, CNF and timing file paths are resolved against this directory,
    # which is also the working directory of the solver process.
    working_directory: Path = Path(".")
    # 0 waits forever.
    time_limit_seconds: float = Field(default=0, ge=0)
    extra_args: List[str] = Field(default_factory=list)
    # Wrapper such as /usr/bin/time, invoked as `<time_binary> -p -o <file> <solver> ...`.
    time_binary: Optional[str] = None
    time_output_path: Optional[str] = None

    @field_validator("extra_args", mode="before")
    @classmethod
    def split_args(cls, v: Union[str, List[str], None]) -> List[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return shlex.split(v)
        return v

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.is_absolute():
            return path
        return self.working_directory / path

    @staticmethod
    def from_env_or_file(**overrides: Any) -> "SolverConfig":
        """
        Builds a config from, in increasing priority: the JSON file named by
        SIMPLESAT_CONFIG_PATH, the SIMPLESAT_* environment variables and ``overrides``.
        """
        data: dict = {}

        config_path = os.environ.get("SIMPLESAT_CONFIG_PATH")
        if config_path:
            try:
                data.update(read_json(config_path))
            except (OSError, ValueError) as e:
                raise SolverError(f"Could not read solver config {config_path}: {e}")

        env_keys = {
            "SIMPLESAT_SOLVER": "solver_path",
            "SIMPLESAT_WORKDIR": "working_directory",
            "SIMPLESAT_TIME_LIMIT": "time_limit_seconds",
            "SIMPLESAT_SOLVER_ARGS": "extra_args",
            "SIMPLESAT_TIME_BINARY": "time_binary",
        }
        for env_name, key in env_keys.items():
            value = os.environ.get(env_name)
            if value:
                data[key] = value

        data.update({k: v for k, v in overrides.items() if v is not None})
        if "solver_path" not in data:
            raise SolverError("No solver configured; set SIMPLESAT_SOLVER or pass solver_path")
        return SolverConfig.model_validate(data)
