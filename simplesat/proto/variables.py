"""
Variable families map application level coordinates onto literal indices.

Every family owns exactly one variable id of its encoding. Fixed dimension
families (1D, 2D, 3D) use a closed form row-major mapping; the open
``VariableND`` family hands out indices in first-seen order and caches both
directions. Any family can be narrowed with ``subset`` which fixes a
coordinate prefix without copying anything.

Accessing ``family[coords]`` registers the resulting literal with the
encoding, which is what makes it eligible for translation.
"""
import abc
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from simplesat.core.errors import CoordinateError, ValidationError
from simplesat.proto.literal import Literal

if TYPE_CHECKING:
    from simplesat.proto.encoding import ProtoEncoding

Coords = Tuple[int, ...]

def _check_coords(coords: Coords, sizes: Optional[Sequence[Optional[int]]]) -> Coords:
    if sizes is not None and len(coords) != len(sizes):
        raise ValidationError(f"Expected {len(sizes)} coordinates, got {len(coords)}")
    for i, c in enumerate(coords):
        if not isinstance(c, int) or isinstance(c, bool):
            raise ValidationError(f"Coordinate {i} must be an integer, got {c!r}")
        if c < 0:
            raise ValidationError(f"Coordinate {i} cannot be negative, got {c}")
        if sizes is not None and sizes[i] is not None and c >= sizes[i]:
            raise ValidationError(f"Coordinate {i} out of range: {c} >= {sizes[i]}")
    return coords

class VariableFamily(abc.ABC):
    """Common interface of all variable shapes."""
    encoding: "ProtoEncoding"
    variable: int
    name: Optional[str] = None

    def _allocate(self, encoding: "ProtoEncoding", variable: Optional[int], name: Optional[str]) -> None:
        self.encoding = encoding
        self.variable = encoding.new_variable(name) if variable is None else variable
        self.name = name

    @abc.abstractmethod
    def index_of(self, *coords: int) -> int:
        """Returns the literal index of the coordinates without registering it."""

    @abc.abstractmethod
    def coordinates_of(self, index: int) -> Coords:
        """Recovers the coordinates a literal index was created from."""

    def __getitem__(self, coords) -> Literal:
        if not isinstance(coords, tuple):
            coords = (coords,)
        lit = Literal(self.variable, self.index_of(*coords))
        if self.name:
            lit = lit.named(self.name, *coords)
        self.encoding.register(lit)
        return lit

    def named(self, name: str, *coords: int) -> Literal:
        return self[coords].named(name, *coords)

    def literals(self, coords_iter) -> List[Literal]:
        """Shorthand for ``[family[c] for c in coords_iter]``."""
        return [self[c] for c in coords_iter]

    def subset(self, *prefix: int) -> "PrefixedVariable":
        return PrefixedVariable(self, prefix)

class Variable1D(VariableFamily):
    """A 1-dimensional family, optionally shifted by a fixed offset."""

    def __init__(self, encoding: "ProtoEncoding", size: Optional[int] = None, offset: int = 0,
                 variable: Optional[int] = None, name: Optional[str] = None):
        if offset < 0:
            raise ValidationError("Offset cannot be negative")
        self._allocate(encoding, variable, name)
        self.size = size
        self.offset = offset

    def index_of(self, *coords: int) -> int:
        (dim0,) = _check_coords(coords, (self.size,))
        return dim0 + self.offset

    def coordinates_of(self, index: int) -> Coords:
        dim0 = index - self.offset
        if dim0 < 0 or (self.size is not None and dim0 >= self.size):
            raise CoordinateError(f"Index {index} does not belong to this variable")
        return (dim0,)

class Variable2D(VariableFamily):
    """
    A 2-dimensional family laid out row-major.

    If ``symmetric`` is set, ``[a, b]`` and ``[b, a]`` address the same literal;
    the pair is stored as ``(min, max)``.
    """

    def __init__(self, encoding: "ProtoEncoding", rows: Optional[int], cols: int,
                 symmetric: bool = False, variable: Optional[int] = None, name: Optional[str] = None):
        if cols is None or cols <= 0:
            raise ValidationError("The last dimension of a 2D variable needs a positive size")
        if symmetric and rows not in (None, cols):
            raise ValidationError("A symmetric 2D variable must be square")
        if symmetric:
            # Folding swaps coordinates, so both are bounded by cols.
            rows = cols
        self._allocate(encoding, variable, name)
        self.rows = rows
        self.cols = cols
        self.symmetric = symmetric

    def index_of(self, *coords: int) -> int:
        dim0, dim1 = _check_coords(coords, (self.rows, self.cols))
        if self.symmetric and dim0 > dim1:
            dim0, dim1 = dim1, dim0
        return dim0 * self.cols + dim1

    def coordinates_of(self, index: int) -> Coords:
        if index < 0:
            raise CoordinateError(f"Index {index} does not belong to this variable")
        dim0, dim1 = divmod(index, self.cols)
        if self.rows is not None and dim0 >= self.rows:
            raise CoordinateError(f"Index {index} does not belong to this variable")
        if self.symmetric and dim0 > dim1:
            raise CoordinateError(f"Index {index} is never produced by a symmetric variable")
        return dim0, dim1

    def row(self, index: int) -> Variable1D:
        """
        A 1D variable sharing this variable's id and addressing row ``index``.
        Useful when a collection of distinct 1D variables is needed.
        """
        if self.symmetric:
            raise ValidationError("Rows of a symmetric variable are not contiguous, use subset() instead")
        _check_coords((index,), (self.rows,))
        return Variable1D(self.encoding, size=self.cols, offset=index * self.cols,
                          variable=self.variable, name=self.name)

class Variable3D(VariableFamily):
    """A 3-dimensional family laid out row-major."""

    def __init__(self, encoding: "ProtoEncoding", dim0: Optional[int], dim1: int, dim2: int,
                 variable: Optional[int] = None, name: Optional[str] = None):
        if dim1 is None or dim2 is None or dim1 <= 0 or dim2 <= 0:
            raise ValidationError("The trailing dimensions of a 3D variable need positive sizes")
        self._allocate(encoding, variable, name)
        self.sizes = (dim0, dim1, dim2)

    def index_of(self, *coords: int) -> int:
        d0, d1, d2 = _check_coords(coords, self.sizes)
        _, size1, size2 = self.sizes
        return d0 * size1 * size2 + d1 * size2 + d2

    def coordinates_of(self, index: int) -> Coords:
        size0, size1, size2 = self.sizes
        if index < 0 or (size0 is not None and index >= size0 * size1 * size2):
            raise CoordinateError(f"Index {index} does not belong to this variable")
        return index // (size1 * size2), index // size2 % size1, index % size2

class VariableND(VariableFamily):
    """
    An open N-dimensional family.

    Indices are assigned lazily: the first access of a coordinate tuple gets the
    next sequential index, later accesses return the cached one. ``sizes`` fixes
    the number of dimensions and their bounds; without it any tuple of
    non-negative integers is accepted.
    """

    def __init__(self, encoding: "ProtoEncoding", sizes: Optional[Sequence[Optional[int]]] = None,
                 variable: Optional[int] = None, name: Optional[str] = None):
        self._allocate(encoding, variable, name)
        self.sizes = tuple(sizes) if sizes is not None else None
        self._indices: Dict[Coords, int] = {}
        self._coords: List[Coords] = []

    def index_of(self, *coords: int) -> int:
        key = _check_coords(tuple(coords), self.sizes)
        index = self._indices.get(key)
        if index is None:
            index = len(self._coords)
            self._indices[key] = index
            self._coords.append(key)
        return index

    def coordinates_of(self, index: int) -> Coords:
        if not 0 <= index < len(self._coords):
            raise CoordinateError(f"Index {index} has not been assigned by this variable")
        return self._coords[index]

    def __len__(self) -> int:
        return len(self._coords)

    def __contains__(self, coords) -> bool:
        if not isinstance(coords, tuple):
            coords = (coords,)
        return coords in self._indices

class PrefixedVariable(VariableFamily):
    """A view of a family with a fixed leading coordinate prefix. Owns no data."""

    def __init__(self, family: VariableFamily, prefix: Sequence[int]):
        self.family = family
        self.prefix = tuple(prefix)
        self.encoding = family.encoding
        self.variable = family.variable
        self.name = family.name

    def index_of(self, *coords: int) -> int:
        return self.family.index_of(*self.prefix, *coords)

    def coordinates_of(self, index: int) -> Coords:
        coords = self.family.coordinates_of(index)
        n = len(self.prefix)
        if coords[:n] != self.prefix:
            raise CoordinateError(f"Index {index} lies outside prefix {self.prefix}")
        return coords[n:]

    def __getitem__(self, coords) -> Literal:
        if not isinstance(coords, tuple):
            coords = (coords,)
        return self.family[self.prefix + coords]

    def subset(self, *prefix: int) -> "PrefixedVariable":
        return PrefixedVariable(self.family, self.prefix + prefix)
