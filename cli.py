from __future__ import annotations

from typing import Dict, Optional

from mastermind import (
    CLASSIC_PALETTE,
    GameConfig,
    GameSession,
    GameState,
    Variant,
    check_guess,
)


# Console configuration
VARIANT: Variant = "classic"
CODE_LENGTH: int = 4
MAX_TURNS: int = 10

EMOJI_MAP: Dict[str, str] = {
    "R": "🔴",
    "G": "🟢",
    "B": "🔵",
    "Y": "🟡",
    "O": "🟠",
    "P": "🟣",
    "BK": "⚫",
    "W": "⚪",
}

REJECT_MESSAGES: Dict[str, str] = {
    "game_over": "The game is over; type 'new' to play again.",
    "incomplete_guess": f"A guess needs exactly {CODE_LENGTH} colors.",
    "duplicate_colors": "Colors may not repeat in this variant.",
    "unknown_color": "That is not a color on the palette.",
    "guess_full": f"A guess holds only {CODE_LENGTH} colors.",
}


def print_legend() -> None:
    items = ", ".join(f"{c.key}={c.name}" for c in CLASSIC_PALETTE)
    print(f"Legend: {items}")


def render_board(snap: Dict[str, object], width: int = 8) -> None:
    title = "| +++++++++++++ Mastermind ++++++++++++ |"
    columns = "| ++++ Guesses ++++ | ++++ Feedback +++ |"
    line = "+----" * width + "+"
    print(line)
    print(title)
    print(line)
    print(columns)
    print(line)
    history = snap["history"]
    assert isinstance(history, list)
    for entry in history:
        row = ""
        for col in entry["guess"]:
            row += "| " + EMOJI_MAP.get(col["key"], col["key"]) + " "
        exact = int(entry["exact"])
        color_only = int(entry["colorOnly"])
        for _ in range(exact):
            row += "| " + EMOJI_MAP["BK"] + " "
        for _ in range(color_only):
            row += "| " + EMOJI_MAP["W"] + " "
        for _ in range(max(0, CODE_LENGTH - exact - color_only)):
            row += "|    "
        print(row + "|")
        print(line)


class BoardRenderer:
    """Redraws the board whenever the number of played turns changes."""

    def __init__(self) -> None:
        self.last_turns: Optional[int] = None

    def __call__(self, snap: Dict[str, object]) -> None:
        turns = snap["turnsUsed"]
        if turns == self.last_turns:
            return
        self.last_turns = int(turns)  # type: ignore[arg-type]
        if turns:
            render_board(snap)


def drain_logs(state: GameState) -> None:
    for line in state.logs:
        print(line)
    state.logs.clear()


def play_guess(session: GameSession, letters: str) -> None:
    code = session.palette.parse_code(list(letters))
    if code is None:
        bad = [ch for ch in letters if session.palette.resolve(ch) is None]
        print(f"Unknown color(s): {', '.join(bad)}. Guess not submitted.")
        return
    reason = check_guess(session.state, code)
    if reason is not None:
        print(REJECT_MESSAGES.get(reason, reason))
        return
    session.clear_guess()
    for col in code:
        session.pick_color(col.key)
    reason = session.submit_guess()
    if reason is not None:
        print(REJECT_MESSAGES.get(reason, reason))
        session.clear_guess()


def announce_result(session: GameSession) -> None:
    state = session.state
    secret = "".join(c.key for c in session.reveal_secret())
    if state.status == "won":
        if session.prefs.sound_on:
            print("\a", end="")
        print("\nCongratulations, you cracked the code!")
        print(f"The secret code was: {secret}")
    elif state.status == "lost":
        print("\nNo more attempts left.")
        print(f"The secret code was: {secret}")


def main() -> None:
    print("=== Mastermind CLI ===")
    print(
        "Type colors as letters (e.g. RGBY). Commands: 'new', 'reveal', 'sound', 'quit'.\n"
    )
    print_legend()
    cfg = GameConfig(
        code_length=CODE_LENGTH,
        max_turns=MAX_TURNS,
        variant=VARIANT,
        palette=CLASSIC_PALETTE,
    )
    session = GameSession(cfg)
    session.subscribe(BoardRenderer())
    drain_logs(session.state)

    while True:
        state = session.state
        if state.status == "playing":
            left = state.cfg.max_turns - state.turns_used
            print(f"\nAttempts left: {left}")
        user_input = input("> ").strip().upper().replace(" ", "")

        if user_input in ("QUIT", "EXIT"):
            print("Exiting game.")
            break
        if user_input == "NEW":
            session.reset_game()
            drain_logs(session.state)
            print_legend()
            continue
        if user_input == "REVEAL":
            print("Secret: " + " ".join(str(c) for c in session.reveal_secret()))
            continue
        if user_input == "SOUND":
            on = session.toggle_sound()
            print(f"Sound {'on' if on else 'off'}.")
            continue

        was_playing = state.status == "playing"
        play_guess(session, user_input)
        drain_logs(session.state)
        if was_playing and session.state.status != "playing":
            announce_result(session)
            print("\nType 'new' for another game or 'quit' to leave.")

    print("\n=== Game Over ===")


if __name__ == "__main__":
    main()
