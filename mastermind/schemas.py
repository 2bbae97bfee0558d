"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Color names are resolved here, so an unknown name is a 422 before any route runs.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .colors import parse_code
from .types import Color, PegResult


def _resolve_names(names: List[str]) -> List[Color]:
    if not isinstance(names, list):
        return names  # let pydantic report the wrong type
    # InvalidColor is a ValueError, which pydantic reports as a validation error
    return parse_code(names)


# 1. Stateless scoring: secret + guess in, pegs out
class ScoreRequest(BaseModel):
    secret: List[Color] = Field(..., description="The secret code as color names (case-insensitive)")
    guess: List[Color] = Field(..., description="The guess, same length as the secret")

    @field_validator("secret", "guess", mode="before")
    @classmethod
    def resolve_colors(cls, names: List[str]) -> List[Color]:
        return _resolve_names(names)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"secret": ["Red", "Blue", "Green", "Yellow"], "guess": ["Red", "Orange", "Yellow", "Orange"]},
            ]
        }
    }


class ScoreResponse(BaseModel):
    pegs: List[PegResult] = Field(..., description="All black pegs first, then all white pegs")
    black: int = Field(..., description="Right color, right position")
    white: int = Field(..., description="Right color, wrong position")


# 2. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    length: int = Field(..., description="Number of pegs in the secret")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")


# 3. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[Color] = Field(
        ..., description="Color names (case-insensitive). Length must match the game's secret."
    )

    @field_validator("guess", mode="before")
    @classmethod
    def resolve_colors(cls, names: List[str]) -> List[Color]:
        """
        Only the names are checked here.
        The length depends on the game, so the route checks it against the secret.
        """
        return _resolve_names(names)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["red", "blue", "green", "yellow"]},
            ]
        }
    }


# 4. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[Color] = Field(..., description="The player's guess")
    pegs: List[PegResult] = Field(..., description="Feedback pegs, black first")
    black: int = Field(..., description="Right color, right position")
    white: int = Field(..., description="Right color, wrong position")
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")


# 5. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    length: int = Field(..., description="Number of pegs in the secret")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")


# 6. Result of a guess (or end of the game)
class GuessResponse(BaseModel):
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    feedback: Optional[GuessEntryOut] = Field(None, description="Feedback from the latest guess")
    secret: Optional[List[Color]] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses allowed.')")
