"""
Errors raised by the scoring core.
Both subclass ValueError so callers (and the API layer) can treat them as bad input.
"""


class InvalidColor(ValueError):
    """Text did not name one of the known peg colors."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid color text: {text!r}")


class LengthMismatch(ValueError):
    """Guess length differs from the secret length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Guess must have exactly {expected} pegs, got {actual}.")
