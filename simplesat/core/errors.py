class SimpleSATError(Exception):
    """Base exception for all SimpleSAT related errors."""
    pass

class ValidationError(SimpleSATError):
    """Raised when an encoding is structurally malformed."""
    pass

class CapacityError(ValidationError):
    """Raised when an encoding runs out of variable families."""
    pass

class CNFError(ValidationError):
    """Raised when an encoding cannot be emitted in the requested DIMACS format."""
    pass

class TranslationError(SimpleSATError, KeyError):
    """Raised when a literal or integer has no counterpart in a translator."""
    pass

class CoordinateError(SimpleSATError, KeyError):
    """Raised when a literal index cannot be mapped back to coordinates."""
    pass

class SolutionParseError(SimpleSATError):
    """Raised when solver output does not contain a valid solution."""
    pass

class SolverError(SimpleSATError):
    """Raised when the solver process cannot be prepared or launched."""
    pass
