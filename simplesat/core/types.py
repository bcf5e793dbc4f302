from enum import Enum
from simplesat.core.errors import ValidationError

# Number of variable families a single encoding may allocate. Family ids
# occupy 7 bits of a byte tag, the 8th bit being the negation flag.
MAX_VARIABLES = 127

class SATFormat(str, Enum):
    """The two DIMACS dialects an encoding can be written in."""
    CNF_SAT = "cnf"
    WCNF_MAXSAT = "wcnf"

def check_comment(comment: str) -> str:
    """Rejects comments that would break the line oriented DIMACS format."""
    if "\n" in comment or "\r" in comment:
        raise ValidationError("Comments cannot contain line breaks")
    return comment
