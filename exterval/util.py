"""Constants shared across exterval.

Literal tokens used by the parser and the canonical rendering, and the
default tolerance for grid-alignment checks.
"""

# Tokens for the infinite bounds in interval literals
NEG_INFINITY_TOKEN = ":neg_infinity"
INFINITY_TOKEN = ":infinity"

# Separator between the bracketed range and the step in a literal
STEP_SEPARATOR = "//"

# Grid alignment uses exact floating-point remainder unless a caller opts in
DEFAULT_TOLERANCE = 0.0
