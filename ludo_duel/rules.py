"""
Move validation.
Decides whether a seat may move a given piece with the pending roll. Never
mutates the match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from loguru import logger

from .board import compute_path, entry_position, is_beyond_home
from .config import config
from .errors import Reason
from .locks import is_locked_against
from .state import MatchState
from .types import Position, Seat


@dataclass(slots=True)
class Verdict:
    legal: bool
    reason: Optional[Reason] = None
    path: List[Position] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.legal


def _illegal(reason: Reason) -> Verdict:
    return Verdict(legal=False, reason=reason)


def check_turn(state: MatchState, seat: Seat) -> Optional[Reason]:
    """Reason the seat cannot act right now, ignoring the dice."""
    if state.winner is not None:
        return Reason.GAME_OVER
    try:
        seat = Seat(seat)
    except ValueError:
        return Reason.UNKNOWN_SEAT
    if seat != state.turn:
        return Reason.NOT_YOUR_TURN
    return None


def check_piece(
    state: MatchState, seat: Seat, piece_index: int, dice: int
) -> Verdict:
    """Piece-level rules for ``dice`` pips, turn ownership aside."""
    if not 0 <= piece_index < config.PIECES_PER_SEAT:
        return _illegal(Reason.INVALID_PIECE)

    current = state.position(seat, piece_index)
    if current.is_home():
        return _illegal(Reason.PIECE_AT_HOME)

    if current.is_base():
        if dice != config.EXIT_ROLL:
            return _illegal(Reason.NEEDS_SIX)
        entry = entry_position(seat)
        # entering onto a cell the seat itself locks is allowed
        if is_locked_against(state.locks, entry, seat):
            return _illegal(Reason.ENTRY_BLOCKED)
        return Verdict(legal=True, path=[entry])

    path = compute_path(seat, current, dice)
    for cell in path:
        if is_locked_against(state.locks, cell, seat):
            logger.debug(f"Piece {seat.name}{piece_index} blocked by lock at {cell}")
            return Verdict(legal=False, reason=Reason.PATH_BLOCKED, path=path)

    if is_beyond_home(seat, current, dice):
        return Verdict(legal=False, reason=Reason.OVERSHOOT, path=path)

    return Verdict(legal=True, path=path)


def validate(state: MatchState, seat: Seat, piece_index: int) -> Verdict:
    """Decide whether ``seat`` may move ``piece_index`` with the pending roll."""
    reason = check_turn(state, seat)
    if reason is not None:
        return _illegal(reason)
    if state.dice is None:
        return _illegal(Reason.NO_ROLL)

    verdict = check_piece(state, Seat(seat), piece_index, state.dice)
    logger.debug(
        f"validate: seat={Seat(seat).name} piece={piece_index} dice={state.dice} "
        f"legal={verdict.legal} reason={verdict.reason} "
        f"path={[str(p) for p in verdict.path]}"
    )
    return verdict


def movable_pieces(
    state: MatchState, seat: Seat, dice: Optional[int] = None
) -> List[int]:
    """Indices of the seat's pieces that may move with ``dice``.

    Uses the pending roll when ``dice`` is omitted; no pending roll means no
    movable piece.
    """
    dice = state.dice if dice is None else dice
    if dice is None or state.winner is not None:
        return []
    return [
        idx
        for idx in range(config.PIECES_PER_SEAT)
        if check_piece(state, Seat(seat), idx, dice).legal
    ]


def legal_mask(
    state: MatchState, seat: Seat, dice: Optional[int] = None
) -> np.ndarray:
    """Boolean action mask over the seat's four pieces."""
    mask = np.zeros(config.PIECES_PER_SEAT, dtype=bool)
    for idx in movable_pieces(state, seat, dice):
        mask[idx] = True
    return mask


def has_legal_move(state: MatchState, seat: Seat, dice: Optional[int] = None) -> bool:
    return bool(movable_pieces(state, seat, dice))
