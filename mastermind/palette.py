from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence
import random

from .types import Code, Color, DEFAULT_PALETTE


class Palette:
    """Ordered set of distinct selectable colors."""

    def __init__(self, colors: Sequence[Color] = DEFAULT_PALETTE) -> None:
        if not colors:
            raise ValueError("Palette must contain at least one color")
        self.colors: List[Color] = list(colors)
        self._by_key: Dict[str, Color] = {}
        for col in self.colors:
            if col.key in self._by_key:
                raise ValueError(f"Duplicate color key in palette: {col.key}")
            self._by_key[col.key] = col

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __contains__(self, color: object) -> bool:
        return isinstance(color, Color) and color.key in self._by_key

    def resolve(self, key: object) -> Optional[Color]:
        # Unknown or malformed identifiers resolve to no color; keys are
        # normalized the same way Color normalizes them
        if not isinstance(key, str):
            return None
        return self._by_key.get(key.strip().upper())

    def parse_code(self, keys: Sequence[str]) -> Optional[Code]:
        out: List[Color] = []
        for k in keys:
            col = self.resolve(k)
            if col is None:
                return None
            out.append(col)
        return tuple(out)

    def draw_code(self, rng: random.Random, length: int, unique: bool = False) -> Code:
        if unique:
            return tuple(rng.sample(self.colors, k=length))
        return tuple(rng.choices(self.colors, k=length))
