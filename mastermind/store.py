"""
In-memory store
Holds game state in memory (nothing is persisted).
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, List, Optional, Sequence, Union
from uuid import uuid4

from .colors import parse_code
from .engine import Scorer, is_win
from .types import Code, Color, GameStatus, PegResult, Pegs

logger = logging.getLogger(__name__)


def feedback_message(black: int, white: int) -> str:
    if black == 0 and white == 0:
        return "all incorrect"
    return f"{black} black peg(s) and {white} white peg(s)"


@dataclass
class GuessEntry:
    guess: Code
    pegs: Pegs
    black: int
    white: int
    message: str
    timestamp: float


@dataclass
class Game:
    id: str
    scorer: Scorer
    attempts_left: int = 10
    initial_attempts: int = 10
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

    @property
    def length(self) -> int:
        return len(self.scorer)


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()

    def create(self, secret: Sequence[Union[Color, str]], attempts: int) -> Game:
        if attempts <= 0:
            raise ValueError("A game needs at least one attempt.")

        # Building the scorer resolves (and validates) the secret colors
        scorer = Scorer(secret)
        game = Game(
            id=str(uuid4()),
            scorer=scorer,
            attempts_left=attempts,
            initial_attempts=attempts,
        )
        with self._lock:
            self._games[game.id] = game
        logger.info("game %s created (%d pegs, %d attempts)", game.id, game.length, attempts)
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: Sequence[Union[Color, str]]) -> Optional[Game]:
        """
        Score one guess and record it.
        Returns None for an unknown game; a finished game comes back unchanged.
        InvalidColor / LengthMismatch from the scorer propagate (nothing is recorded).
        """
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.status != "in_progress":
                # If game already ended, just return it (ignore extra guesses)
                return game

            # Resolve names once; the recorded guess is exactly what gets scored
            colors = parse_code(attempt)
            pegs = game.scorer.check(colors)
            black = pegs.count(PegResult.BLACK)
            white = pegs.count(PegResult.WHITE)

            game.history.append(
                GuessEntry(
                    guess=colors,
                    pegs=pegs,
                    black=black,
                    white=white,
                    message=feedback_message(black, white),
                    timestamp=time(),
                )
            )

            # Update attempts and status
            game.attempts_left -= 1
            if is_win(game.scorer.secret, colors):
                game.status = "won"
            elif game.attempts_left <= 0:
                game.status = "lost"
            game.updated_at = time()

            if game.status != "in_progress":
                logger.info(
                    "game %s %s after %d guess(es)",
                    game.id, game.status, game.initial_attempts - game.attempts_left,
                )
            return game

    def get_secret(self, game_id: str) -> Optional[Code]:
        """Return the secret code ONLY for finished games; else None."""
        with self._lock:
            game = self._games.get(game_id)
            if game is None or game.status == "in_progress":
                return None
            return list(game.scorer.secret)
