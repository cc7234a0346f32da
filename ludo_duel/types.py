from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Union


class Seat(IntEnum):
    A = 0
    B = 1

    @property
    def other(self) -> "Seat":
        return Seat(1 - int(self))


class PositionKind(Enum):
    BASE = "base"  # not yet entered
    TRACK = "track"  # shared ring
    HOME_LANE = "home_lane"  # seat-private final stretch
    HOME = "home"  # terminal


@dataclass(frozen=True, slots=True)
class Position:
    """A piece location.

    Track cells are shared, so they carry no seat. Base slots, home-lane
    cells and Home belong to one seat and carry it, which makes two equal
    positions always the same physical cell.
    """

    kind: PositionKind
    index: int = 0
    seat: Optional[Seat] = None

    @classmethod
    def base(cls, seat: Seat, slot: int) -> "Position":
        return cls(PositionKind.BASE, slot, Seat(seat))

    @classmethod
    def track(cls, index: int) -> "Position":
        return cls(PositionKind.TRACK, index, None)

    @classmethod
    def home_lane(cls, seat: Seat, index: int) -> "Position":
        return cls(PositionKind.HOME_LANE, index, Seat(seat))

    @classmethod
    def home(cls, seat: Seat) -> "Position":
        return cls(PositionKind.HOME, 0, Seat(seat))

    def is_base(self) -> bool:
        return self.kind is PositionKind.BASE

    def is_track(self) -> bool:
        return self.kind is PositionKind.TRACK

    def is_home_lane(self) -> bool:
        return self.kind is PositionKind.HOME_LANE

    def is_home(self) -> bool:
        return self.kind is PositionKind.HOME

    def __str__(self) -> str:
        if self.is_track():
            return f"T{self.index}"
        if self.is_home_lane():
            return f"L{self.seat.name}{self.index}"
        if self.is_home():
            return f"H{self.seat.name}"
        return f"B{self.seat.name}{self.index}"


class Phase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class Capture:
    seat: Seat
    piece_index: int


@dataclass(slots=True)
class MovementRecord:
    seat: Seat
    piece_index: int
    path: List[Position]
    captured: List[Capture] = field(default_factory=list)
    winner: Optional[Seat] = None

    @property
    def kill_occurred(self) -> bool:
        return bool(self.captured)

    @property
    def final_position(self) -> Position:
        return self.path[-1]


# --- Commands accepted by game.dispatch ---
@dataclass(frozen=True, slots=True)
class Roll:
    """Ask the match to roll. The dice value always comes from the match rng."""


@dataclass(frozen=True, slots=True)
class Move:
    piece_index: int


@dataclass(frozen=True, slots=True)
class Pass:
    pass


Command = Union[Roll, Move, Pass]
