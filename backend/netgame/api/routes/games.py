"""
Game Routes

REST API endpoints for engine sessions:
- Create/list/get/delete sessions
- Ask the engine for its move
- Report the opponent's move, or force the engine's own
"""

import math
import random
import uuid
from enum import Enum
from typing import Dict, List, Optional, Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...core import Move, Side
from ...ai import MachinePlayer

router = APIRouter()


# =============================================================================
# Pydantic Models for Request/Response
# =============================================================================

class SideName(str, Enum):
    """Sides for API"""
    BLACK = "black"
    WHITE = "white"


class CreateGameRequest(BaseModel):
    """Request model for creating a new engine session"""
    side: SideName = Field(default=SideName.BLACK, description="Side the engine plays")
    search_depth: int = Field(default=2, ge=1, le=4, description="Search depth in plies")
    seed: Optional[int] = Field(default=None, description="Seed for the opening shortcut")

    model_config = {
        "json_schema_extra": {
            "example": {"side": "black", "search_depth": 2}
        }
    }


class MoveRequest(BaseModel):
    """Request model for a move"""
    kind: str = Field(..., description="add, step or quit")
    x1: Optional[int] = Field(default=None, description="Destination x")
    y1: Optional[int] = Field(default=None, description="Destination y")
    x2: Optional[int] = Field(default=None, description="Source x (step only)")
    y2: Optional[int] = Field(default=None, description="Source y (step only)")

    model_config = {
        "json_schema_extra": {
            "example": {"kind": "step", "x1": 3, "y1": 4, "x2": 2, "y2": 2}
        }
    }


class MoveResponse(BaseModel):
    """Response model for a move the engine made"""
    move: Dict[str, Any]
    notation: str
    stats: Dict[str, Any]


class GameStateResponse(BaseModel):
    """Response model for session state"""
    game_id: str
    engine_side: str
    grid: List[List[str]]
    chip_counts: Dict[str, int]
    networks: Dict[str, int]
    valid_move_count: int
    winner: Optional[str] = None
    board_text: str


# =============================================================================
# Session Storage (In-Memory)
# =============================================================================

games_store: Dict[str, MachinePlayer] = {}


def get_player(game_id: str) -> MachinePlayer:
    player = games_store.get(game_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return player


def parse_move(request: MoveRequest) -> Move:
    """Convert a request body to a Move, 400 on malformed input"""
    try:
        return Move.from_dict(request.model_dump())
    except (KeyError, TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"Malformed move: {request.kind}")


def finite(value: Any) -> Any:
    """JSON has no infinity; report decided scores as strings"""
    if isinstance(value, float) and math.isinf(value):
        return "win" if value > 0 else "loss"
    return value


def game_state_to_response(game_id: str, player: MachinePlayer) -> GameStateResponse:
    """Convert a session to an API response"""
    board = player.board
    winner = player.winner()
    return GameStateResponse(
        game_id=game_id,
        engine_side=str(player.side),
        grid=board.to_grid(),
        chip_counts={str(s): board.chip_count(s) for s in (Side.BLACK, Side.WHITE)},
        networks={str(s): board.network_count(s) for s in (Side.BLACK, Side.WHITE)},
        valid_move_count=len(board.get_all_valid_moves(player.side)),
        winner=str(winner) if winner else None,
        board_text=str(board),
    )


# =============================================================================
# Routes
# =============================================================================

@router.post("/", response_model=GameStateResponse)
async def create_game(request: CreateGameRequest):
    """Start a new engine session"""
    game_id = str(uuid.uuid4())
    rng = random.Random(request.seed) if request.seed is not None else None
    games_store[game_id] = MachinePlayer(
        Side.from_name(request.side.value),
        search_depth=request.search_depth,
        rng=rng,
    )
    return game_state_to_response(game_id, games_store[game_id])


@router.get("/", response_model=List[str])
async def list_games():
    """List session ids"""
    return list(games_store.keys())


@router.get("/{game_id}", response_model=GameStateResponse)
async def get_game(game_id: str):
    """Get session state"""
    return game_state_to_response(game_id, get_player(game_id))


@router.delete("/{game_id}")
async def delete_game(game_id: str):
    """End a session"""
    get_player(game_id)
    del games_store[game_id]
    return {"deleted": game_id}


@router.post("/{game_id}/choose", response_model=MoveResponse)
async def choose_move(game_id: str):
    """Have the engine pick and record its move"""
    player = get_player(game_id)
    if player.winner() is not None:
        raise HTTPException(status_code=400, detail="Game is already over")
    try:
        move = player.choose_move()
    except RuntimeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    stats = {k: finite(v) for k, v in player.agent.get_search_stats().items()}
    return MoveResponse(move=move.to_dict(), notation=str(move), stats=stats)


@router.post("/{game_id}/opponent", response_model=GameStateResponse)
async def opponent_move(game_id: str, request: MoveRequest):
    """Tell the engine what its opponent played"""
    player = get_player(game_id)
    move = parse_move(request)
    if not player.opponent_move(move):
        raise HTTPException(status_code=400, detail=f"Illegal move: {move}")
    return game_state_to_response(game_id, player)


@router.post("/{game_id}/force", response_model=GameStateResponse)
async def force_move(game_id: str, request: MoveRequest):
    """Record a move for the engine's own side (problem setup)"""
    player = get_player(game_id)
    move = parse_move(request)
    if not player.force_move(move):
        raise HTTPException(status_code=400, detail=f"Illegal move: {move}")
    return game_state_to_response(game_id, player)
