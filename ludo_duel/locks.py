from __future__ import annotations

from collections import Counter
from typing import Dict, Mapping, Sequence

from loguru import logger

from .types import Position, Seat

LockMap = Dict[Position, Seat]


def compute_locks(pieces: Mapping[Seat, Sequence[Position]]) -> LockMap:
    """Derive locked cells from a full snapshot of piece positions.

    A Track or Home-lane cell is locked when exactly one seat has two or more
    pieces on it. Base and Home never lock. Always rebuilt from scratch.
    """
    counts: Counter[tuple[Position, Seat]] = Counter()
    for seat, positions in pieces.items():
        for pos in positions:
            if pos.is_base() or pos.is_home():
                continue
            counts[(pos, Seat(seat))] += 1

    stacked: Dict[Position, list[Seat]] = {}
    for (pos, seat), n in counts.items():
        if n >= 2:
            stacked.setdefault(pos, []).append(seat)

    locks: LockMap = {
        pos: owners[0] for pos, owners in stacked.items() if len(owners) == 1
    }
    if locks:
        logger.debug(
            f"Locked cells: {[f'{pos}:{seat.name}' for pos, seat in locks.items()]}"
        )
    return locks


def is_locked_against(
    locks: Mapping[Position, Seat], position: Position, seat: Seat
) -> bool:
    """True when ``position`` is locked by the opponent of ``seat``."""
    owner = locks.get(position)
    return owner is not None and owner != seat
