import json
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterable, Iterator, Union

PathLike = Union[str, Path]

@contextmanager
def _replace_on_success(path: PathLike) -> Iterator[IO[str]]:
    """
    Opens a temporary sibling of ``path`` for writing and moves it over ``path``
    once the block completes. The target is left untouched if the block fails.
    """
    path = Path(path)
    safe_mkdir(path.parent)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".part")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            yield f
        os.replace(temp_name, path)
    finally:
        if os.path.exists(temp_name):
            os.remove(temp_name)

def atomic_write_lines(path: PathLike, lines: Iterable[str]) -> None:
    """Writes each line followed by a newline. Lines may come from a lazy generator."""
    with _replace_on_success(path) as f:
        for line in lines:
            f.write(line)
            f.write("\n")

def atomic_write_text(path: PathLike, text: str) -> None:
    with _replace_on_success(path) as f:
        f.write(text)

def safe_mkdir(path: PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)

def read_text(path: PathLike, errors: str = "strict") -> str:
    with open(path, "r", encoding="utf-8", errors=errors) as f:
        return f.read()

def read_json(path: PathLike) -> Any:
    return json.loads(read_text(path))
