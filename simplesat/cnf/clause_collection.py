from typing import Callable, Generic, Iterator, List, NamedTuple, Tuple, TypeVar

from simplesat.cnf.clause import Clause
from simplesat.cnf.dimacs import comment_line
from simplesat.core.types import check_comment

T = TypeVar("T")
Y = TypeVar("Y")

class Comment(NamedTuple):
    """A comment line placed right before the clause at position ``index``."""
    text: str
    index: int

class ClauseCollection(Generic[T]):
    """
    An ordered list of clauses paired with comments anchored to clause positions.
    Comments are useful for debugging encodings.
    """

    def __init__(self):
        self._clauses: List[Clause[T]] = []
        self._comments: List[Comment] = []

    def __len__(self) -> int:
        return len(self._clauses)

    @property
    def comments(self) -> Tuple[Comment, ...]:
        return tuple(self._comments)

    def add(self, clause: Clause[T]) -> None:
        self._clauses.append(clause)

    def comment(self, text: str) -> None:
        """Adds a comment before the next clause to be added."""
        self._comments.append(Comment(check_comment(text), len(self._clauses)))

    def clauses(self) -> Iterator[Clause[T]]:
        yield from self._clauses

    def lines_of(self, clause_format: Callable[[Clause[T]], str]) -> Iterator[str]:
        """
        Yields the clause lines produced by ``clause_format`` with the comment lines
        interleaved. All comments anchored at one position come out in insertion
        order before the clause at that position; comments anchored past the last
        clause come out at the end.
        """
        comments = iter(self._comments)
        pending = next(comments, None)
        for i, clause in enumerate(self._clauses):
            while pending is not None and pending.index <= i:
                yield comment_line(pending.text)
                pending = next(comments, None)
            yield clause_format(clause)
        while pending is not None:
            yield comment_line(pending.text)
            pending = next(comments, None)

    @classmethod
    def with_comments_of(cls, previous: "ClauseCollection[Y]") -> "ClauseCollection[T]":
        """An empty collection carrying the comments of another one."""
        collection = cls()
        collection._comments = list(previous._comments)
        return collection
