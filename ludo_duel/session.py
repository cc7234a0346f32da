"""
Room registry.

Pairs waiting connections into two-seat rooms and serialises each room's
intents behind its own lock. Transport is left to the caller: it forwards
``join``/``leave`` and the decoded commands, then broadcasts the returned
outcome to the room.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from .codec import decode_command, encode_outcome
from .errors import LudoError, NoSuchMatch, NotYourTurn, Reason, RoomFull
from .game import Outcome, create_match, dispatch
from .state import MatchState
from .types import Command, Seat


@dataclass(slots=True)
class Room:
    room_id: str
    players: Dict[Seat, str] = field(default_factory=dict)
    match: Optional[MatchState] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def is_full(self) -> bool:
        return len(self.players) == len(Seat)

    def seat_of(self, connection_id: str) -> Seat | None:
        for seat, conn in self.players.items():
            if conn == connection_id:
                return seat
        return None

    def free_seat(self) -> Seat | None:
        for seat in Seat:
            if seat not in self.players:
                return seat
        return None


@dataclass(slots=True)
class Assignment:
    room_id: str
    seat: Seat
    started: bool


class RoomRegistry:
    """Owned table of rooms keyed by room id."""

    def __init__(
        self, *, seed: Optional[int] = None, strict_pass: Optional[bool] = None
    ) -> None:
        self._rooms: Dict[str, Room] = {}
        self._connections: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._serial = itertools.count(1)
        self._seed = seed
        self._strict_pass = strict_pass

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def join(self, connection_id: str) -> Assignment:
        """Seat a connection in the first room with a free seat."""
        with self._lock:
            if connection_id in self._connections:
                raise RoomFull(message=f"{connection_id} is already seated.")

            room = self._find_available_room()
            if room is None:
                room = Room(room_id=self._new_room_id(connection_id))
                self._rooms[room.room_id] = room
                logger.info(f"Created new room: {room.room_id}")

            seat = room.free_seat()
            if seat is None:
                raise RoomFull()
            room.players[seat] = connection_id
            self._connections[connection_id] = room.room_id
            logger.info(f"Player {seat.name} ({connection_id}) joined {room.room_id}")

            started = False
            if room.is_full and room.match is None:
                room.match = create_match(
                    room.players[Seat.A],
                    room.players[Seat.B],
                    seed=self._seed,
                    strict_pass=self._strict_pass,
                )
                started = True
                logger.info(f"Game started in {room.room_id}")
            return Assignment(room_id=room.room_id, seat=seat, started=started)

    def leave(self, connection_id: str) -> Optional[str]:
        """Drop a connection. Its room's match ends; empty rooms are deleted."""
        with self._lock:
            room_id = self._connections.pop(connection_id, None)
            if room_id is None:
                return None
            room = self._rooms.get(room_id)
            if room is None:
                return room_id
            with room.lock:
                seat = room.seat_of(connection_id)
                if seat is not None:
                    del room.players[seat]
                room.match = None
            logger.info(f"Player {connection_id} left room {room_id}")
            if not room.players:
                del self._rooms[room_id]
                logger.info(f"Room {room_id} deleted")
            return room_id

    def _find_available_room(self) -> Optional[Room]:
        for room in self._rooms.values():
            if not room.is_full:
                return room
        return None

    def _new_room_id(self, connection_id: str) -> str:
        # A connection may come back while its old room is still in play.
        room_id = f"room-{connection_id}"
        while room_id in self._rooms:
            room_id = f"room-{connection_id}-{next(self._serial)}"
        return room_id

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def handle(self, room_id: str, connection_id: str, command: Command) -> Outcome:
        """Dispatch one intent against the room's match, one at a time."""
        with self._lock:
            room = self._rooms.get(room_id)
        if room is None:
            raise NoSuchMatch()

        with room.lock:
            if room.match is None:
                raise NoSuchMatch()
            seat = room.seat_of(connection_id)
            if seat is None:
                raise NotYourTurn(Reason.UNKNOWN_SEAT)
            try:
                outcome = dispatch(room.match, seat, command)
            except LudoError as exc:
                logger.warning(
                    f"Rejected {type(command).__name__} from {connection_id} "
                    f"in {room_id}: {exc.reason.value}"
                )
                raise

        if outcome.winner is not None:
            self._close(room_id)
        return outcome

    def handle_payload(
        self, room_id: str, connection_id: str, payload: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Decode a wire intent, handle it and return the payload to broadcast.

        Raises:
            ValueError: for a malformed payload.
            LudoError: for a rejected intent; relay ``codec.encode_error``
                to the sender only.
        """
        command = decode_command(payload)
        return encode_outcome(self.handle(room_id, connection_id, command))

    def _close(self, room_id: str) -> None:
        with self._lock:
            room = self._rooms.pop(room_id, None)
            if room is None:
                return
            for conn in room.players.values():
                self._connections.pop(conn, None)
        logger.info(f"Room {room_id} closed")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, room_id: str) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def rooms(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def room_of(self, connection_id: str) -> Optional[str]:
        with self._lock:
            return self._connections.get(connection_id)
