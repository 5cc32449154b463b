from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple, TypeAlias


@dataclass(frozen=True)
class Color:
    key: str  # hex code, unique within a palette
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # Keys compare case-insensitively
        object.__setattr__(self, "key", self.key.strip().upper())

    def __str__(self) -> str:
        return self.name or self.key


Code: TypeAlias = Tuple[Color, ...]

Status = Literal["playing", "won", "lost"]
Variant = Literal["classic", "unique"]
RejectReason = Literal[
    "game_over",
    "incomplete_guess",
    "duplicate_colors",
    "unknown_color",
    "guess_full",
]
Theme = Literal["light", "dark"]


@dataclass(frozen=True)
class Feedback:
    exact: int        # right color, right position
    color_only: int   # right color, wrong position


@dataclass(frozen=True)
class GuessEntry:
    guess: Code
    feedback: Feedback


# Browser palette
DEFAULT_PALETTE: Tuple[Color, ...] = (
    Color("#3B0855", "Deep Purple"),
    Color("#852467", "Plum"),
    Color("#FD8083", "Coral"),
    Color("#EE227D", "Neon Pink"),
)

# Console palette; keys double as the letters typed in a guess
CLASSIC_PALETTE: Tuple[Color, ...] = (
    Color("R", "Red"),
    Color("G", "Green"),
    Color("B", "Blue"),
    Color("Y", "Yellow"),
    Color("O", "Orange"),
    Color("P", "Purple"),
)

CODE_LENGTH: int = 4
MAX_TURNS: int = 10
