"""
Turn arbitration.

Each seat in turn goes AWAITING_ROLL -> AWAITING_MOVE -> (repeat | swap).
A roll of six or a capturing move keeps the turn; any other completed move
or a pass hands it to the other seat. The dice is cleared on every
transition.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .config import config
from .errors import NoRoll, Reason, error_for
from .rules import check_turn
from .state import MatchState
from .types import Seat


def ensure_can_roll(state: MatchState, seat: Seat) -> None:
    reason = check_turn(state, seat)
    if reason is not None:
        raise error_for(reason)
    if state.dice is not None:
        raise error_for(Reason.ROLL_PENDING)


def ensure_can_act(state: MatchState, seat: Seat) -> None:
    """The seat holds the turn and a roll is pending (move or pass)."""
    reason = check_turn(state, seat)
    if reason is not None:
        raise error_for(reason)
    if state.dice is None:
        raise NoRoll()


def record_roll(state: MatchState, seat: Seat, value: Optional[int] = None) -> int:
    ensure_can_roll(state, seat)
    if value is None:
        value = state.rng.randint(config.DICE_MIN, config.DICE_MAX)
    elif not config.DICE_MIN <= value <= config.DICE_MAX:
        raise ValueError(f"Dice value must be within 1..6, got {value}")
    state.dice = value
    logger.debug(f"Seat {Seat(seat).name} rolled {value}")
    return value


def grants_extra_turn(dice: int, kill_occurred: bool) -> bool:
    return dice == config.EXIT_ROLL or kill_occurred


def finish_move(state: MatchState) -> bool:
    """Transition after an applied move. Returns True on a repeat turn."""
    extra = grants_extra_turn(state.dice, state.kill_occurred)
    if not extra:
        state.turn = state.turn.other
    state.dice = None
    state.kill_occurred = False
    logger.debug(f"Turn -> {state.turn.name} (extra={extra})")
    return extra


def skip_turn(state: MatchState) -> None:
    """Transition after a pass: the other seat always takes over."""
    state.turn = state.turn.other
    state.dice = None
    state.kill_occurred = False
    logger.debug(f"Pass, turn -> {state.turn.name}")
