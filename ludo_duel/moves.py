"""
Move application.
Advances a validated piece, resolves captures on the landed cell and rebuilds
the lock index.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from .board import base_position, is_safe
from .rules import Verdict, validate
from .state import MatchState
from .types import Capture, MovementRecord, Position, Seat


def resolve_captures(state: MatchState, seat: Seat, landed: Position) -> List[Capture]:
    """Send every opposing piece on ``landed`` back to its own base slot.

    No capture on safe cells, nor on a cell that is locked, whoever owns the
    lock. Lock ownership is read from the index as it stood before the move.
    """
    if is_safe(landed):
        return []
    if state.locks.get(landed) is not None:
        # the validator already forbids landing on an opponent lock
        return []

    captured: List[Capture] = []
    for other in Seat:
        if other == seat:
            continue
        for idx, pos in enumerate(state.pieces[other]):
            if pos == landed:
                state.pieces[other][idx] = base_position(other, idx)
                captured.append(Capture(seat=other, piece_index=idx))
                logger.debug(
                    f"Seat {seat.name} captured {other.name}{idx} at {landed}"
                )
    return captured


def apply_move(
    state: MatchState,
    seat: Seat,
    piece_index: int,
    verdict: Optional[Verdict] = None,
) -> MovementRecord:
    """Execute a legal move and return its movement record.

    ``verdict`` is the result of a ``validate`` call made against the current
    state. It is computed here when omitted.

    Raises:
        AssertionError: if the move does not validate. Callers validate first.
    """
    seat = Seat(seat)
    if verdict is None:
        verdict = validate(state, seat, piece_index)
    if not verdict.legal:
        raise AssertionError(
            f"apply_move called with an illegal move ({verdict.reason}); validate first"
        )

    path = list(verdict.path)
    landed = path[-1]
    state.pieces[seat][piece_index] = landed

    captured = resolve_captures(state, seat, landed)
    state.kill_occurred = bool(captured)
    state.refresh_locks()
    state.moves_played += 1

    logger.debug(
        f"apply_move: seat={seat.name} piece={piece_index} "
        f"path={[str(p) for p in path]} captured={len(captured)}"
    )
    return MovementRecord(
        seat=seat, piece_index=piece_index, path=path, captured=captured
    )
