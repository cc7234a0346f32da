"""
Two-seat Ludo rules engine.
Authoritative board topology, locks, move validation, captures, turn
arbitration and win detection for server-hosted matches.
"""

from .config import config
from .codec import decode_command, encode_error, encode_outcome, encode_snapshot
from .errors import (
    GameOver,
    IllegalMove,
    LudoError,
    NoRoll,
    NoSuchMatch,
    NotYourTurn,
    Reason,
    RoomFull,
)
from .game import (
    Outcome,
    Snapshot,
    create_match,
    dispatch,
    has_won,
    move,
    pass_turn,
    roll,
    snapshot,
)
from .rules import Verdict, legal_mask, movable_pieces, validate
from .session import RoomRegistry
from .state import MatchState
from .types import (
    Capture,
    Move,
    MovementRecord,
    Pass,
    Phase,
    Position,
    PositionKind,
    Roll,
    Seat,
)

__all__ = [
    "config",
    "decode_command",
    "encode_error",
    "encode_outcome",
    "encode_snapshot",
    "Seat",
    "Position",
    "PositionKind",
    "Phase",
    "Capture",
    "MovementRecord",
    "Roll",
    "Move",
    "Pass",
    "MatchState",
    "Snapshot",
    "Outcome",
    "Verdict",
    "create_match",
    "roll",
    "move",
    "pass_turn",
    "dispatch",
    "has_won",
    "snapshot",
    "validate",
    "movable_pieces",
    "legal_mask",
    "RoomRegistry",
    "LudoError",
    "NotYourTurn",
    "NoRoll",
    "IllegalMove",
    "GameOver",
    "RoomFull",
    "NoSuchMatch",
    "Reason",
]
