from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
import random

from .types import Code, Color, RejectReason, Theme
from .palette import Palette
from .core import (
    GameConfig,
    GameState,
    new_game,
    submit_guess as engine_submit,
    reveal_secret as engine_reveal,
    is_game_over,
    to_json,
)


Listener = Callable[[Dict[str, object]], None]


@dataclass
class Preferences:
    sound_on: bool = True
    theme: Theme = "light"


class GameSession:
    """
    Single owner of one game plus the player's in-progress guess.

    Presentation layers talk to the game only through the intent methods
    below; every intent ends by pushing a fresh snapshot to subscribers.
    Preferences and the random source outlive ``reset_game``.
    """

    def __init__(self, cfg: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.cfg: GameConfig = cfg or GameConfig()
        self.palette = Palette(self.cfg.palette)
        self.rng: random.Random = rng if rng is not None else random.Random(self.cfg.seed)
        self.prefs = Preferences()
        self.current_guess: List[Color] = []
        self.last_rejection: Optional[RejectReason] = None
        self._listeners: List[Listener] = []
        self.state: GameState = new_game(self.cfg, self.rng)

    # --- subscriptions ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        snap = self.snapshot()
        for fn in list(self._listeners):
            fn(snap)

    # --- intents ---

    def _check_pick(self, color: Optional[Color]) -> Optional[RejectReason]:
        if color is None:
            return "unknown_color"
        if is_game_over(self.state):
            return "game_over"
        if len(self.current_guess) >= self.cfg.code_length:
            return "guess_full"
        if self.cfg.unique and color in self.current_guess:
            return "duplicate_colors"
        return None

    def pick_color(self, key: object) -> bool:
        color = self.palette.resolve(key)
        self.last_rejection = self._check_pick(color)
        added = self.last_rejection is None and color is not None
        if added:
            self.current_guess.append(color)
        self._emit()
        return added

    def undo_color(self) -> bool:
        self.last_rejection = None
        removed = False
        if self.current_guess and not is_game_over(self.state):
            self.current_guess.pop()
            removed = True
        self._emit()
        return removed

    def clear_guess(self) -> None:
        self.last_rejection = None
        self.current_guess = []
        self._emit()

    def submit_guess(self) -> Optional[RejectReason]:
        reason = engine_submit(self.state, self.current_guess)
        self.last_rejection = reason
        if reason is None:
            self.current_guess = []
        self._emit()
        return reason

    def reset_game(self) -> GameState:
        self.state = new_game(self.cfg, self.rng)
        self.current_guess = []
        self.last_rejection = None
        self._emit()
        return self.state

    def toggle_sound(self) -> bool:
        self.last_rejection = None
        self.prefs.sound_on = not self.prefs.sound_on
        self._emit()
        return self.prefs.sound_on

    def toggle_theme(self) -> Theme:
        self.last_rejection = None
        self.prefs.theme = "dark" if self.prefs.theme == "light" else "light"
        self._emit()
        return self.prefs.theme

    def reveal_secret(self) -> Code:
        return engine_reveal(self.state)

    # --- read side ---

    def snapshot(self, reveal: bool = False) -> Dict[str, object]:
        data = to_json(self.state, reveal=reveal)
        data["currentGuess"] = [{"key": c.key, "name": c.name} for c in self.current_guess]
        data["rejected"] = self.last_rejection
        data["prefs"] = {"soundOn": self.prefs.sound_on, "theme": self.prefs.theme}
        return data
