from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from .types import Color, Feedback, Variant


Scorer = Callable[[Sequence[Color], Sequence[Color]], Feedback]


def score(guess: Sequence[Color], secret: Sequence[Color]) -> Feedback:
    """
    Classic Mastermind feedback for ``guess`` against ``secret``.

    Exact matches are taken first and their positions are consumed on both
    sides. Each remaining guess position then claims the lowest-index
    unconsumed secret position holding the same color, so no slot on either
    side is counted twice.

    Returns:
        Feedback: (exact, color_only)
    """
    exact = 0
    color_only = 0

    remaining_secret: List[Optional[Color]] = list(secret)
    remaining_guess: List[Optional[Color]] = list(guess)

    for i in range(len(secret)):
        if guess[i] == secret[i]:
            exact += 1
            remaining_guess[i] = None
            remaining_secret[i] = None

    for col in remaining_guess:
        if col is None:
            continue
        for j, sc in enumerate(remaining_secret):
            if sc is not None and sc == col:
                color_only += 1
                remaining_secret[j] = None
                break

    return Feedback(exact, color_only)


def score_unique(guess: Sequence[Color], secret: Sequence[Color]) -> Feedback:
    # Codes hold distinct colors: misplaced == present elsewhere
    exact = sum(1 for g, s in zip(guess, secret) if g == s)
    present = set(secret)
    color_only = sum(1 for g, s in zip(guess, secret) if g != s and g in present)
    return Feedback(exact, color_only)


SCORERS: Dict[str, Scorer] = {
    "classic": score,
    "unique": score_unique,
}


def score_for(variant: Variant) -> Scorer:
    try:
        return SCORERS[variant]
    except KeyError:
        raise ValueError(f"Unknown variant: {variant}") from None
