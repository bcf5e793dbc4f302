from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from simplesat.cnf.clause import Clause
from simplesat.core.errors import TranslationError, ValidationError
from simplesat.proto.literal import Literal

if TYPE_CHECKING:
    from simplesat.proto.encoding import ProtoEncoding

class LiteralTranslator:
    """
    Two-way mapping between proto literals and DIMACS variables (1-based).

    Built from an encoding, literals are numbered family by family in
    registration order. With ``sort_literals`` they are numbered by
    ``(variable, index)`` instead, which costs a sort but makes the emitted
    files much easier to debug.
    """

    def __init__(self, encoding: Optional["ProtoEncoding"] = None, sort_literals: bool = False):
        self._values: Dict[Literal, int] = {}
        self._keys: Dict[int, Literal] = {}

        if encoding is None:
            return

        literals: List[Literal] = []
        for registered in encoding.registered_literals():
            literals.extend(registered)
        if sort_literals:
            literals.sort(key=lambda lit: (lit.variable, lit.index))

        for value, lit in enumerate(literals, start=1):
            self.add(lit, value)

    def add(self, key: Literal, value: int) -> None:
        """Adds a translation for a literal."""
        if value < 1:
            raise ValidationError("Value must always be greater than or equal to 1")
        if key.negated:
            raise ValidationError("Literals to add cannot be negations")
        if key.index < 0:
            raise ValidationError("Key literal index cannot be negative")
        if key in self._values:
            raise ValidationError(f"Literal {key} already has a translation")
        if value in self._keys:
            raise ValidationError(f"Value {value} is already assigned to {self._keys[value]}")
        self._values[key] = value
        self._keys[value] = key

    def value_of(self, key: Literal) -> int:
        try:
            return self._values[key]
        except KeyError:
            raise TranslationError(f"Literal {key} has no translation") from None

    def signed_value_of(self, key: Literal) -> int:
        value = self.value_of(key)
        return -value if key.negated else value

    def literal_of(self, value: int) -> Literal:
        try:
            return self._keys[value]
        except KeyError:
            raise TranslationError(f"Value {value} has never been assigned") from None

    def translate_clause(self, clause: Clause[Literal]) -> Clause[int]:
        return Clause(clause.cost, tuple(self.signed_value_of(lit) for lit in clause.literals))

    def items(self) -> Iterator[Tuple[Literal, int]]:
        yield from self._values.items()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: Literal) -> bool:
        return key in self._values

    def __str__(self) -> str:
        return "\n".join(f"Translate: {key} = {value}" for key, value in self._values.items())
