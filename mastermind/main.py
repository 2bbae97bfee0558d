'''
Mastermind scoring API (in-memory)

Endpoints:
POST /score                -> score one guess against a given secret (stateless)
POST /games                -> start a game with a random secret
GET  /games/{id}           -> read state & history
POST /games/{id}/guess     -> submit a guess
GET  /colors               -> accepted color names

Games live in process memory only; restarting the server forgets them.
'''

import logging

from fastapi import FastAPI, HTTPException, Depends, Query
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .colors import COLOR_NAMES
from .engine import Scorer
from .errors import LengthMismatch
from .random_client import fetch_code
from .store import Game, GameStore, GuessEntry
from .types import PegResult

from .schemas import (
    ScoreRequest,
    ScoreResponse,
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
    GuessEntryOut,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="1.0.0")

# Logging is set up when the server starts, not when this module is imported
@app.on_event("startup")
def _configure_logging():
    logging.basicConfig()
    logging.getLogger("mastermind").setLevel(config.LOG_LEVEL)

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One store per process
_store = GameStore()

def get_store() -> GameStore:
    return _store

# --- DTO builders ---

def _to_guess_out(entry: GuessEntry) -> GuessEntryOut:
    return GuessEntryOut(
        guess=entry.guess,
        pegs=entry.pegs,
        black=entry.black,
        white=entry.white,
        message=entry.message,
        timestamp=entry.timestamp,
    )

def _to_game_state(game: Game) -> GameState:
    return GameState(
        game_id=game.id,
        length=game.length,
        attempts_left=game.attempts_left,
        status=game.status,
        history=[_to_guess_out(h) for h in game.history],
    )

# ---------------- Routes ----------------

@app.get("/colors", summary="List accepted color names")
def list_colors() -> dict:
    return {"colors": list(COLOR_NAMES)}

@app.post("/score", response_model=ScoreResponse, summary="Score a guess against a secret")
def score(payload: ScoreRequest) -> ScoreResponse:
    try:
        pegs = Scorer(payload.secret).check(payload.guess)
    except LengthMismatch as lm:
        raise HTTPException(status_code=400, detail=str(lm))
    except ValueError as ve:
        # empty secret
        raise HTTPException(status_code=400, detail=str(ve))

    return ScoreResponse(
        pegs=pegs,
        black=pegs.count(PegResult.BLACK),
        white=pegs.count(PegResult.WHITE),
    )

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    length: int = Query(config.CODE_LENGTH, ge=1, le=10, description="Number of pegs in the secret"),
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    secret = fetch_code(length)                   # random.org w/ secure fallback
    game = store.create(secret, config.MAX_ATTEMPTS)

    return NewGameResponse(
        game_id=game.id,
        length=game.length,
        attempts_left=game.attempts_left,
        status=game.status,
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    game = store.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_game_state(game)

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    # store.guess() runs the scorer, which performs the length check
    try:
        updated = store.guess(game_id, payload.guess)
    except LengthMismatch as lm:
        raise HTTPException(status_code=400, detail=str(lm))
    if not updated:
        raise HTTPException(status_code=404, detail="Game not found")

    feedback = _to_guess_out(updated.history[-1]) if updated.history else None

    # When the game ends, include the secret in the response
    secret = None
    if updated.status != "in_progress":
        secret = store.get_secret(game_id)

    return GuessResponse(
        attempts_left=updated.attempts_left,
        status=updated.status,
        feedback=feedback,
        secret=secret,
        note=(f"Game {updated.status}. No more guesses allowed."
              if updated.status != "in_progress" else None),
    )
