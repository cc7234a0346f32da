"""
Wire payloads.

Positions travel as plain integers:

    Track       0..51            (shared)
    Home lane   100..104 / 300..304
    Home        105 / 305
    Base        500..503 / 700..703

Seats travel as their index (A=0, B=1).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from .config import config
from .errors import LudoError
from .game import Outcome, Snapshot
from .types import (
    Command,
    Move,
    MovementRecord,
    Pass,
    Position,
    PositionKind,
    Roll,
    Seat,
)

COMMAND_ALIASES: Dict[str, str] = {
    "roll": "roll",
    "rollDice": "roll",
    "move": "move",
    "makeMove": "move",
    "pass": "pass",
    "noMoves": "pass",
}


def encode_position(position: Position) -> int:
    kind = position.kind
    if kind is PositionKind.TRACK:
        return position.index
    seat = position.seat
    if kind is PositionKind.HOME_LANE:
        return config.HOME_LANE_CODES[seat] + position.index
    if kind is PositionKind.HOME:
        return config.HOME_LANE_CODES[seat] + config.HOME_LANE_LENGTH
    return config.BASE_CODES[seat] + position.index


def decode_position(code: int) -> Position:
    code = int(code)
    if 0 <= code < config.TRACK_LENGTH:
        return Position.track(code)
    for seat in Seat:
        lane = config.HOME_LANE_CODES[seat]
        if lane <= code < lane + config.HOME_LANE_LENGTH:
            return Position.home_lane(seat, code - lane)
        if code == lane + config.HOME_LANE_LENGTH:
            return Position.home(seat)
        base = config.BASE_CODES[seat]
        if base <= code < base + config.PIECES_PER_SEAT:
            return Position.base(seat, code - base)
    raise ValueError(f"Unknown position code: {code}")


def encode_positions(
    positions: Mapping[Seat, Sequence[Position]],
) -> Dict[int, List[int]]:
    return {int(s): [encode_position(p) for p in ps] for s, ps in positions.items()}


def encode_locks(locks: Mapping[Position, Seat]) -> Dict[int, int]:
    return {encode_position(pos): int(seat) for pos, seat in locks.items()}


def encode_record(record: MovementRecord) -> Dict[str, Any]:
    return {
        "seat": int(record.seat),
        "pieceIndex": record.piece_index,
        "path": [encode_position(p) for p in record.path],
        "killOccurred": record.kill_occurred,
        "capturedPieces": [
            {"seat": int(c.seat), "pieceIndex": c.piece_index}
            for c in record.captured
        ],
        "winner": None if record.winner is None else int(record.winner),
    }


def encode_snapshot(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "currentPositions": encode_positions(snapshot.positions),
        "turn": int(snapshot.turn),
        "diceValue": snapshot.dice,
        "killOccurred": snapshot.kill_occurred,
        "lockedPositions": encode_locks(snapshot.locks),
        "phase": snapshot.phase.value,
        "winner": None if snapshot.winner is None else int(snapshot.winner),
    }


def encode_error(error: LudoError) -> Dict[str, str]:
    return {"message": error.message, "reason": error.reason.value}


def encode_outcome(outcome: Outcome) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "seat": int(outcome.seat),
        "gameState": encode_snapshot(outcome.snapshot),
    }
    if isinstance(outcome.command, Roll):
        payload["type"] = "diceRolled"
        payload["diceValue"] = outcome.dice
    elif outcome.record is not None:
        payload["type"] = "gameOver" if outcome.winner is not None else "updateGameState"
        payload["moveData"] = encode_record(outcome.record)
        payload["extraTurn"] = outcome.extra_turn
        if outcome.winner is not None:
            payload["winner"] = int(outcome.winner)
    else:
        payload["type"] = "updateGameState"
    return payload


def decode_command(payload: Mapping[str, Any]) -> Command:
    """Parse ``{"type": ..., "pieceIndex": ...}`` into a command."""
    kind = COMMAND_ALIASES.get(str(payload.get("type", "")))
    if kind == "roll":
        return Roll()
    if kind == "pass":
        return Pass()
    if kind == "move":
        if "pieceIndex" not in payload:
            raise ValueError("move command requires pieceIndex")
        raw = payload["pieceIndex"]
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise ValueError(f"pieceIndex must be an integer, got {raw!r}")
        return Move(piece_index=int(raw))
    raise ValueError(f"Unknown command type: {payload.get('type')!r}")
