from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .board import initial_positions
from .config import config
from .locks import LockMap, compute_locks
from .types import Phase, Position, Seat


@dataclass(slots=True)
class MatchState:
    """Aggregate record of one room's match.

    Owned by the session layer and handed to the engine per call. Mutated
    only through ``game.roll``, ``game.move`` and ``game.pass_turn``.
    """

    players: Tuple[str, str]  # participant ids, seat A then seat B
    pieces: Dict[Seat, List[Position]] = field(init=False)
    turn: Seat = Seat.A
    dice: Optional[int] = None
    kill_occurred: bool = False
    locks: LockMap = field(default_factory=dict, init=False)
    winner: Optional[Seat] = None
    strict_pass: bool = config.STRICT_PASS
    rng: random.Random = field(default_factory=random.Random, repr=False)
    moves_played: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.pieces = {seat: initial_positions(seat) for seat in Seat}
        self.refresh_locks()

    @property
    def phase(self) -> Phase:
        if self.winner is not None:
            return Phase.FINISHED
        if self.dice is None:
            return Phase.AWAITING_ROLL
        return Phase.AWAITING_MOVE

    def position(self, seat: Seat, piece_index: int) -> Position:
        return self.pieces[seat][piece_index]

    def refresh_locks(self) -> LockMap:
        self.locks = compute_locks(self.pieces)
        return self.locks
