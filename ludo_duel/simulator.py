from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from loguru import logger

from .config import config
from .game import create_match, dispatch
from .rules import legal_mask
from .state import MatchState
from .types import Move, MovementRecord, Pass, Roll, Seat


@dataclass(slots=True)
class SimulationResult:
    winner: Optional[Seat]
    turns: int
    captures: int
    records: List[MovementRecord] = field(default_factory=list, repr=False)


@dataclass(slots=True)
class Simulator:
    """Plays a full match between two random policies through ``dispatch``."""

    seed: Optional[int] = None
    max_turns: int = config.MAX_TURNS
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def new_match(self) -> MatchState:
        rng = random.Random(self.rng.getrandbits(32))
        return create_match("sim-a", "sim-b", rng=rng)

    def choose(self, state: MatchState, seat: Seat) -> Optional[int]:
        mask: np.ndarray = legal_mask(state, seat)
        candidates = np.flatnonzero(mask)
        if candidates.size == 0:
            return None
        return int(self.rng.choice(candidates.tolist()))

    def play(self, state: Optional[MatchState] = None) -> SimulationResult:
        state = state or self.new_match()
        records: List[MovementRecord] = []
        captures = 0
        turns = 0

        while state.winner is None and turns < self.max_turns:
            seat = state.turn
            dispatch(state, seat, Roll())
            turns += 1
            piece = self.choose(state, seat)
            if piece is None:
                dispatch(state, seat, Pass())
                continue
            outcome = dispatch(state, seat, Move(piece))
            records.append(outcome.record)
            captures += len(outcome.record.captured)

        if state.winner is None:
            logger.warning(f"No winner after {turns} turns")
        else:
            logger.info(
                f"Seat {state.winner.name} won after {turns} turns ({captures} captures)"
            )
        return SimulationResult(
            winner=state.winner, turns=turns, captures=captures, records=records
        )
