from simplesat.proto.literal import Literal
from simplesat.proto.variables import (
    VariableFamily, Variable1D, Variable2D, Variable3D, VariableND, PrefixedVariable
)
from simplesat.proto.encoding import ProtoEncoding
from simplesat.proto.translator import LiteralTranslator

__all__ = [
    "Literal",
    "VariableFamily", "Variable1D", "Variable2D", "Variable3D", "VariableND", "PrefixedVariable",
    "ProtoEncoding",
    "LiteralTranslator"
]
