"""
Match-level call surface consumed by the session layer.

Every intent either fully applies or raises a ``LudoError`` before touching
the match.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from loguru import logger

from .board import home_position
from .config import config
from .errors import GameOver, IllegalMove, NotYourTurn, Reason, error_for
from .locks import LockMap
from .moves import apply_move
from .rules import has_legal_move, validate
from .state import MatchState
from .turns import ensure_can_act, finish_move, record_roll, skip_turn
from .types import Command, Move, MovementRecord, Pass, Phase, Position, Roll, Seat


@dataclass(frozen=True, slots=True)
class Snapshot:
    positions: Dict[Seat, Tuple[Position, ...]]
    turn: Seat
    dice: Optional[int]
    kill_occurred: bool
    locks: LockMap
    phase: Phase
    winner: Optional[Seat]


@dataclass(slots=True)
class Outcome:
    seat: Seat
    command: Command
    snapshot: Snapshot
    dice: Optional[int] = None
    record: Optional[MovementRecord] = None
    extra_turn: bool = False
    winner: Optional[Seat] = None
    events: List[str] = field(default_factory=list)


# --- Lifecycle ---
def create_match(
    seat_a: str,
    seat_b: str,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    strict_pass: Optional[bool] = None,
) -> MatchState:
    """Seed both seats at base; seat A rolls first."""
    if seat_a == seat_b:
        raise ValueError("A match needs two distinct participants")
    if rng is None:
        rng = random.Random(config.SEED if seed is None else seed)
    state = MatchState(
        players=(seat_a, seat_b),
        rng=rng,
        strict_pass=config.STRICT_PASS if strict_pass is None else strict_pass,
    )
    logger.info(f"Match created: A={seat_a} B={seat_b}")
    return state


def has_won(state: MatchState, seat: Seat) -> bool:
    home = home_position(seat)
    return all(pos == home for pos in state.pieces[seat])


# --- Intents ---
def roll(state: MatchState, seat: Seat, *, value: Optional[int] = None) -> int:
    return record_roll(state, seat, value)


def move(state: MatchState, seat: Seat, piece_index: int) -> MovementRecord:
    verdict = validate(state, seat, piece_index)
    if not verdict.legal:
        raise error_for(verdict.reason)

    seat = Seat(seat)
    record = apply_move(state, seat, piece_index, verdict)
    if has_won(state, seat):
        state.winner = seat
        state.dice = None
        record.winner = seat
        logger.info(f"Seat {seat.name} ({state.players[seat]}) has won")
        return record

    finish_move(state)
    return record


def pass_turn(state: MatchState, seat: Seat) -> None:
    ensure_can_act(state, seat)
    if state.strict_pass and has_legal_move(state, seat):
        raise IllegalMove(Reason.MOVE_AVAILABLE)
    skip_turn(state)


def dispatch(state: MatchState, seat: Seat, command: Command) -> Outcome:
    """Single entry point for the closed command set."""
    if state.winner is not None:
        raise GameOver()
    try:
        seat = Seat(seat)
    except ValueError:
        raise NotYourTurn(Reason.UNKNOWN_SEAT) from None

    if isinstance(command, Roll):
        value = roll(state, seat)
        return Outcome(
            seat=seat, command=command, snapshot=snapshot(state), dice=value
        )

    if isinstance(command, Move):
        record = move(state, seat, command.piece_index)
        extra = record.winner is None and state.turn == seat
        events = ["capture"] if record.kill_occurred else []
        if record.winner is not None:
            events.append("game_over")
        return Outcome(
            seat=seat,
            command=command,
            snapshot=snapshot(state),
            record=record,
            extra_turn=extra,
            winner=record.winner,
            events=events,
        )

    if isinstance(command, Pass):
        pass_turn(state, seat)
        return Outcome(seat=seat, command=command, snapshot=snapshot(state))

    raise TypeError(f"Unknown command: {command!r}")


# --- Read-only queries ---
def positions(state: MatchState) -> Dict[Seat, Tuple[Position, ...]]:
    return {seat: tuple(pieces) for seat, pieces in state.pieces.items()}


def locks(state: MatchState) -> LockMap:
    return dict(state.locks)


def current_seat(state: MatchState) -> Seat:
    return state.turn


def pending_dice(state: MatchState) -> Optional[int]:
    return state.dice


def phase(state: MatchState) -> Phase:
    return state.phase


def snapshot(state: MatchState) -> Snapshot:
    return Snapshot(
        positions=positions(state),
        turn=state.turn,
        dice=state.dice,
        kill_occurred=state.kill_occurred,
        locks=locks(state),
        phase=state.phase,
        winner=state.winner,
    )
