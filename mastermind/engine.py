"""
Pure game logic (no HTTP, no storage).
For each guess we hand back feedback pegs:
- BLACK: right color in the right position
- WHITE: right color, but it sits at another (still unused) position of the secret

Each secret peg is used at most once, so BLACK + WHITE never exceeds the code length.
Duplicates are allowed in both the secret and the guess.
"""

import logging
from collections import Counter
from typing import Callable, List, Sequence, Tuple, Union

from .colors import parse_color
from .errors import LengthMismatch
from .types import Code, Color, PegResult, Pegs

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]
Parser = Callable[[str], Color]


def masked_pins(pins: Sequence[Color], mask: Sequence[bool]) -> Code:
    """Pins whose mask entry is still True (i.e. not used up yet), in order."""
    return [pin for pin, unused in zip(pins, mask) if unused]


def _black_pass(secret: Sequence[Color], guess: Sequence[Color], unused: List[bool]) -> Pegs:
    # Purely positional; marks matched positions so the white pass skips them
    pegs: Pegs = []
    for i in range(len(secret)):
        if guess[i] == secret[i]:
            pegs.append(PegResult.BLACK)
            unused[i] = False
    return pegs


def _white_pass(secret: Sequence[Color], guess: Sequence[Color], unused: List[bool]) -> Pegs:
    # Leftover colors on both sides; overlap is the sum of the smaller count per color
    secret_counts = Counter(masked_pins(secret, unused))
    guess_counts = Counter(masked_pins(guess, unused))
    whites = sum((secret_counts & guess_counts).values())
    return [PegResult.WHITE] * whites


def _check_lengths(secret: Sequence[Color], guess: Sequence[Color]) -> None:
    n = len(secret)
    if n == 0:
        raise ValueError("Secret must have at least one peg.")
    if len(guess) != n:
        raise LengthMismatch(expected=n, actual=len(guess))


def score_guess(secret: Sequence[Color], guess: Sequence[Color]) -> Tuple[int, int]:
    """
    Example:
      secret = [GREEN, BLUE, BLUE, BLUE]
      guess  = [RED, GREEN, RED, RED]
      black  = 0  (no position matches)
      white  = 1  (green is in the secret, just not at index 1)
      Returns a tuple: (black, white)
    """
    _check_lengths(secret, guess)

    # 0. Fresh usage mask per call; nothing leaks between calls
    unused = [True] * len(secret)

    # 1. Exact matches first, then colors left over
    black = len(_black_pass(secret, guess, unused))
    white = len(_white_pass(secret, guess, unused))
    return (black, white)


def is_win(secret: Sequence[Color], guess: Sequence[Color]) -> bool:
    """
    Win = every peg matches in order.
    Lengths must match; otherwise it's simply not a win.
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return all(s == g for s, g in zip(secret, guess))


class Scorer:
    """
    Holds one immutable secret and scores guesses against it.

    Both the secret and the guesses may be given as Color values or as color
    names; names go through `parser` (parse_color unless another one is injected),
    and its InvalidColor error is passed on untouched.
    """

    def __init__(self, secret: Sequence[ColorLike], parser: Parser = parse_color):
        self._parser = parser
        resolved = tuple(self._resolve(secret))
        if not resolved:
            raise ValueError("Secret must have at least one peg.")
        self._secret: Tuple[Color, ...] = resolved

    @property
    def secret(self) -> Tuple[Color, ...]:
        return self._secret

    def __len__(self) -> int:
        return len(self._secret)

    def __repr__(self) -> str:
        # never print the secret itself
        return f"Scorer(length={len(self._secret)})"

    def _resolve(self, items: Sequence[ColorLike]) -> Code:
        return [item if isinstance(item, Color) else self._parser(item) for item in items]

    def check(self, guess: Sequence[ColorLike]) -> Pegs:
        """
        Score one guess. Output is all BLACK pegs first, then all WHITE pegs;
        a miss simply adds nothing.

        Raises:
          InvalidColor   -- a guess item is not a known color name
          LengthMismatch -- guess length differs from the secret
        """
        colors = self._resolve(guess)
        _check_lengths(self._secret, colors)

        unused = [True] * len(self._secret)
        pegs = _black_pass(self._secret, colors, unused)
        pegs.extend(_white_pass(self._secret, colors, unused))

        logger.debug("scored guess: %d black, %d white", pegs.count(PegResult.BLACK), pegs.count(PegResult.WHITE))
        return pegs

    def feedback(self, guess: Sequence[ColorLike]) -> Tuple[int, int]:
        """Same as check() but as (black, white) counts."""
        pegs = self.check(guess)
        return (pegs.count(PegResult.BLACK), pegs.count(PegResult.WHITE))
