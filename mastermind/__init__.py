from .types import (
    Color,
    Code,
    Feedback,
    GuessEntry,
    Status,
    Variant,
    RejectReason,
    DEFAULT_PALETTE,
    CLASSIC_PALETTE,
    CODE_LENGTH,
    MAX_TURNS,
)
from .palette import Palette
from .scoring import score, score_unique, score_for
from .core import (
    GameConfig,
    GameState,
    new_game,
    check_guess,
    submit_guess,
    is_game_over,
    remaining_turns,
    reveal_secret,
    to_json,
)
from .session import GameSession, Preferences

__all__ = [
    "Color",
    "Code",
    "Feedback",
    "GuessEntry",
    "Status",
    "Variant",
    "RejectReason",
    "DEFAULT_PALETTE",
    "CLASSIC_PALETTE",
    "CODE_LENGTH",
    "MAX_TURNS",
    "Palette",
    "score",
    "score_unique",
    "score_for",
    "GameConfig",
    "GameState",
    "new_game",
    "check_guess",
    "submit_guess",
    "is_game_over",
    "remaining_turns",
    "reveal_secret",
    "to_json",
    "GameSession",
    "Preferences",
]
