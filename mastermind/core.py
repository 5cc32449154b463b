from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import random

from .types import (
    Code,
    Color,
    GuessEntry,
    RejectReason,
    Status,
    Variant,
    CODE_LENGTH,
    DEFAULT_PALETTE,
    MAX_TURNS,
)
from .palette import Palette
from .scoring import SCORERS, score_for


MAX_LOG_LINES: int = 100


def _append_log(state: "GameState", msg: str) -> None:
    if state.logs is None:
        state.logs = []
    state.logs.append(msg)
    # Keep only the most recent lines
    if len(state.logs) > MAX_LOG_LINES:
        del state.logs[:-MAX_LOG_LINES]


def _code_str(code: Sequence[Color]) -> str:
    return " ".join(str(c) for c in code)


@dataclass
class GameConfig:
    code_length: int = CODE_LENGTH
    max_turns: int = MAX_TURNS
    variant: Variant = "classic"
    palette: Tuple[Color, ...] = DEFAULT_PALETTE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.code_length < 1:
            raise ValueError("code_length must be at least 1")
        if self.max_turns < 1:
            raise ValueError("max_turns must be at least 1")
        if self.variant not in SCORERS:
            raise ValueError(f"Unknown variant: {self.variant}")
        self.palette = tuple(self.palette)
        # Raises on empty or duplicate palettes
        pal = Palette(self.palette)
        if self.variant == "unique" and len(pal) < self.code_length:
            raise ValueError(
                f"Unique variant needs at least {self.code_length} colors, "
                f"palette has {len(pal)}"
            )

    @property
    def unique(self) -> bool:
        return self.variant == "unique"


@dataclass
class GameState:
    cfg: GameConfig
    secret: Code
    history: List[GuessEntry] = field(default_factory=list)
    status: Status = "playing"
    logs: List[str] = field(default_factory=list)

    @property
    def turns_used(self) -> int:
        return len(self.history)


def new_game(cfg: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> GameState:
    cfg = cfg or GameConfig()
    if rng is None:
        rng = random.Random(cfg.seed)
    secret = Palette(cfg.palette).draw_code(rng, cfg.code_length, unique=cfg.unique)
    state = GameState(cfg=cfg, secret=secret, history=[], status="playing", logs=[])
    _append_log(state, f"NEW_GAME: variant={cfg.variant} length={cfg.code_length} turns={cfg.max_turns}")
    return state


def is_game_over(state: GameState) -> bool:
    return state.status != "playing"


def remaining_turns(state: GameState) -> int:
    return max(0, state.cfg.max_turns - state.turns_used)


def check_guess(state: GameState, guess: Sequence[Color]) -> Optional[RejectReason]:
    if is_game_over(state):
        return "game_over"
    if len(guess) != state.cfg.code_length:
        return "incomplete_guess"
    if state.cfg.unique and len(set(guess)) != len(guess):
        return "duplicate_colors"
    return None


def submit_guess(state: GameState, guess: Sequence[Color]) -> Optional[RejectReason]:
    """
    Score ``guess`` against the secret and advance the game by one turn.

    A guess that fails ``check_guess`` leaves the state untouched; the
    reason is logged and returned instead of raised.

    Returns:
        None when the guess was accepted, otherwise the rejection reason.
    """
    reason = check_guess(state, guess)
    if reason is not None:
        _append_log(state, f"REJECTED: {reason}")
        return reason

    code: Code = tuple(guess)
    feedback = score_for(state.cfg.variant)(code, state.secret)
    state.history.append(GuessEntry(guess=code, feedback=feedback))
    _append_log(
        state,
        f"GUESS {state.turns_used}: {_code_str(code)} -> exact={feedback.exact} color_only={feedback.color_only}",
    )

    if feedback.exact == state.cfg.code_length:
        state.status = "won"
        _append_log(state, f"WON: turn {state.turns_used}")
    elif state.turns_used >= state.cfg.max_turns:
        state.status = "lost"
        _append_log(state, f"LOST: turn {state.turns_used}")
    return None


def reveal_secret(state: GameState) -> Code:
    return state.secret


# --- JSON snapshot (pure, no I/O) ---

def _color_to_obj(color: Color) -> Dict[str, object]:
    return {"key": color.key, "name": color.name}


def _code_to_obj(code: Sequence[Color]) -> List[Dict[str, object]]:
    return [_color_to_obj(c) for c in code]


def to_json(state: GameState, reveal: bool = False) -> Dict[str, object]:
    cfg_obj: Dict[str, object] = {
        "codeLength": int(state.cfg.code_length),
        "maxTurns": int(state.cfg.max_turns),
        "variant": state.cfg.variant,
        "palette": _code_to_obj(state.cfg.palette),
    }
    history_obj: List[Dict[str, object]] = []
    for entry in state.history:
        history_obj.append({
            "guess": _code_to_obj(entry.guess),
            "exact": int(entry.feedback.exact),
            "colorOnly": int(entry.feedback.color_only),
        })
    return {
        "schemaVersion": 1,
        "config": cfg_obj,
        "history": history_obj,
        "turnsUsed": state.turns_used,
        "remainingTurns": remaining_turns(state),
        "status": state.status,
        # Only exposed on explicit reveal
        "secret": _code_to_obj(state.secret) if reveal else None,
        "logs": list(state.logs),
    }
