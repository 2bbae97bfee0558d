"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal


class Color(Enum):
    """Closed set of peg colors. Values are the JSON/text form."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    WHITE = "white"
    YELLOW = "yellow"
    ORANGE = "orange"


class PegResult(Enum):
    BLACK = "black"  # right color, right place
    WHITE = "white"  # right color, somewhere else


Code = List[Color]  # secret or guess, 4 pegs by default
Pegs = List[PegResult]
GameStatus = Literal["in_progress", "won", "lost"]
