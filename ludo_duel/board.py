"""
Board topology for the two-seat board.
Pure functions mapping a position to its successor along a seat's route.
"""

from __future__ import annotations

from typing import FrozenSet, List

from .config import config
from .types import Position, PositionKind, Seat

_SAFE_CELLS: FrozenSet[Position] = frozenset(
    Position.track(cell) for cell in config.SAFE_CELLS
)


def entry_position(seat: Seat) -> Position:
    """Track cell a piece lands on when it leaves base."""
    return Position.track(config.ENTRY_CELLS[seat])


def turning_point(seat: Seat) -> Position:
    """Last shared-track cell before the seat's home lane."""
    return Position.track(config.TURNING_POINTS[seat])


def base_position(seat: Seat, slot: int) -> Position:
    return Position.base(seat, slot)


def home_position(seat: Seat) -> Position:
    return Position.home(seat)


def initial_positions(seat: Seat) -> List[Position]:
    return [base_position(seat, i) for i in range(config.PIECES_PER_SEAT)]


def is_safe(position: Position) -> bool:
    return position in _SAFE_CELLS


def _check_owner(seat: Seat, position: Position) -> None:
    if position.seat is not None and position.seat != seat:
        raise ValueError(f"{position} does not belong to seat {Seat(seat).name}")


def next_position(seat: Seat, position: Position) -> Position:
    """Successor of ``position`` along ``seat``'s route.

    Raises:
        ValueError: for Base and Home positions, which have no successor,
            and for private positions of the other seat.
    """
    _check_owner(seat, position)
    kind = position.kind
    if kind is PositionKind.TRACK:
        if position == turning_point(seat):
            return Position.home_lane(seat, 0)
        if position.index == config.TRACK_LENGTH - 1:
            return Position.track(0)
        return Position.track(position.index + 1)
    if kind is PositionKind.HOME_LANE:
        if position.index + 1 < config.HOME_LANE_LENGTH:
            return Position.home_lane(seat, position.index + 1)
        return Position.home(seat)
    raise ValueError(f"{position} has no successor")


def compute_path(seat: Seat, position: Position, dice: int) -> List[Position]:
    """Cells visited for ``dice`` pips, stopping early once Home is reached."""
    path: List[Position] = []
    current = position
    for _ in range(dice):
        current = next_position(seat, current)
        path.append(current)
        if current.is_home():
            break
    return path


def pips_to_home(seat: Seat, position: Position) -> int:
    """Exact number of pips needed to reach Home from ``position``."""
    _check_owner(seat, position)
    kind = position.kind
    if kind is PositionKind.HOME:
        return 0
    if kind is PositionKind.HOME_LANE:
        return config.HOME_LANE_LENGTH - position.index
    if kind is PositionKind.TRACK:
        to_turn = (config.TURNING_POINTS[seat] - position.index) % config.TRACK_LENGTH
        return to_turn + config.HOME_LANE_LENGTH + 1
    raise ValueError(f"{position} is not on the route")


def is_beyond_home(seat: Seat, position: Position, dice: int) -> bool:
    """True when ``dice`` pips from ``position`` would land past Home."""
    return dice > pips_to_home(seat, position)
