from enum import Enum


class Reason(Enum):
    """Machine tags for rejected intents. Values go on the wire."""

    NOT_YOUR_TURN = "not_your_turn"
    UNKNOWN_SEAT = "unknown_seat"
    ROLL_PENDING = "roll_pending"
    NO_ROLL = "no_roll"
    INVALID_PIECE = "invalid_piece"
    PIECE_AT_HOME = "piece_at_home"
    NEEDS_SIX = "needs_six"
    ENTRY_BLOCKED = "entry_blocked"
    PATH_BLOCKED = "path_blocked"
    OVERSHOOT = "overshoot"
    MOVE_AVAILABLE = "move_available"
    GAME_OVER = "game_over"
    ROOM_FULL = "room_full"
    NO_SUCH_MATCH = "no_such_match"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Reason.NOT_YOUR_TURN: "It is not your turn.",
    Reason.UNKNOWN_SEAT: "You are not seated in this match.",
    Reason.ROLL_PENDING: "The dice has already been rolled; move or pass.",
    Reason.NO_ROLL: "Roll the dice before moving.",
    Reason.INVALID_PIECE: "There is no such piece.",
    Reason.PIECE_AT_HOME: "That piece has already reached home.",
    Reason.NEEDS_SIX: "A piece can only leave base on a six.",
    Reason.ENTRY_BLOCKED: "Your entry cell is locked by your opponent.",
    Reason.PATH_BLOCKED: "Invalid move due to locked positions.",
    Reason.OVERSHOOT: "The roll would overshoot home.",
    Reason.MOVE_AVAILABLE: "A legal move exists; you cannot pass.",
    Reason.GAME_OVER: "The match is over.",
    Reason.ROOM_FULL: "Room is full.",
    Reason.NO_SUCH_MATCH: "No match is running in this room.",
}


class LudoError(Exception):
    """Base exception for rejected intents. State is never mutated."""

    default_reason = Reason.NOT_YOUR_TURN

    def __init__(self, reason: Reason | None = None, message: str | None = None):
        self.reason = reason or self.default_reason
        self.message = message or self.reason.message
        super().__init__(self.message)


class NotYourTurn(LudoError):
    """Raised when the seat does not hold the turn or cannot roll now."""

    default_reason = Reason.NOT_YOUR_TURN


class NoRoll(LudoError):
    """Raised when a move or pass arrives with no pending dice."""

    default_reason = Reason.NO_ROLL


class IllegalMove(LudoError):
    """Raised when the rules forbid the requested piece move."""

    default_reason = Reason.PATH_BLOCKED


class GameOver(LudoError):
    """Raised when an intent arrives after the match produced a winner."""

    default_reason = Reason.GAME_OVER


class RoomFull(LudoError):
    """Raised by the session layer when no seat can be assigned."""

    default_reason = Reason.ROOM_FULL


class NoSuchMatch(LudoError):
    """Raised by the session layer for unknown or idle rooms."""

    default_reason = Reason.NO_SUCH_MATCH


_ERRORS_BY_REASON = {
    Reason.NOT_YOUR_TURN: NotYourTurn,
    Reason.UNKNOWN_SEAT: NotYourTurn,
    Reason.ROLL_PENDING: NotYourTurn,
    Reason.NO_ROLL: NoRoll,
    Reason.GAME_OVER: GameOver,
}


def error_for(reason: Reason) -> LudoError:
    """Build the exception a validator reason is reported as."""
    return _ERRORS_BY_REASON.get(reason, IllegalMove)(reason)
