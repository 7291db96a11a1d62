"""Reserved token types shared with the grammar engine.

These values belong to the engine that consumes interval sets; they are
mirrored here so rendering and ``first()`` can recognize them.
"""

# Token type returned by ``first()`` on an empty set
TOKEN_INVALID_TYPE = 0

# End-of-input marker
TOKEN_EOF = -1

# Transition that consumes no input
TOKEN_EPSILON = -2

TOKEN_MIN_USER_TOKEN_TYPE = 1
