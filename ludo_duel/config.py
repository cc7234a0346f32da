import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    NUM_SEATS: int = 2
    PIECES_PER_SEAT: int = 4
    TRACK_LENGTH: int = 52  # shared ring, cells 0..51
    HOME_LANE_LENGTH: int = 5  # private lane, cells 0..4, then Home
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_ROLL: int = 6

    # Seat A, Seat B (opposite colours of a four-colour board)
    ENTRY_CELLS: list[int] = field(default_factory=lambda: [0, 26])
    TURNING_POINTS: list[int] = field(default_factory=lambda: [50, 24])
    SAFE_CELLS: list[int] = field(
        default_factory=lambda: [0, 8, 13, 21, 26, 34, 39, 47]
    )

    # Wire encoding bases (see codec.py)
    HOME_LANE_CODES: list[int] = field(default_factory=lambda: [100, 300])
    BASE_CODES: list[int] = field(default_factory=lambda: [500, 700])

    # --- Runtime ---
    MAX_TURNS: int = int(os.getenv("LUDO_MAX_TURNS", 1000))
    STRICT_PASS: bool = bool(int(os.getenv("LUDO_STRICT_PASS", 0)))
    LOG_LEVEL: str = os.getenv("LUDO_LOG_LEVEL", "INFO")
    SEED: int | None = (
        int(os.environ["LUDO_SEED"]) if os.getenv("LUDO_SEED") else None
    )

    def __post_init__(self):
        if self.NUM_SEATS != 2:
            raise ValueError("NUM_SEATS must be 2")
        if self.PIECES_PER_SEAT != 4:
            raise ValueError("PIECES_PER_SEAT must be 4")
        for name in ("ENTRY_CELLS", "TURNING_POINTS"):
            cells = getattr(self, name)
            if len(cells) != self.NUM_SEATS:
                raise ValueError(f"{name} needs one cell per seat")
            if any(not 0 <= c < self.TRACK_LENGTH for c in cells):
                raise ValueError(f"{name} must lie on the track")
        if any(not 0 <= c < self.TRACK_LENGTH for c in self.SAFE_CELLS):
            raise ValueError("SAFE_CELLS must lie on the track")
        if self.MAX_TURNS <= 0:
            raise ValueError("MAX_TURNS must be positive")


config = Config()
