import random

import pytest

from mastermind import CLASSIC_PALETTE, DEFAULT_PALETTE, Color, Palette


def test_color_keys_compare_case_insensitively():
    assert Color("#fd8083") == Color("#FD8083", "Coral")
    assert Color("#fd8083") in Palette(DEFAULT_PALETTE)
    assert Color("#fd8084") not in Palette(DEFAULT_PALETTE)
    assert "#FD8083" not in Palette(DEFAULT_PALETTE)


def test_resolve_matches_color_equality():
    pal = Palette(DEFAULT_PALETTE)
    col = pal.resolve(" #fd8083 ")
    assert col is not None
    assert col.name == "Coral"
    assert col == Color("#fd8083")
    assert pal.resolve("#000000") is None
    assert pal.resolve(42) is None


def test_parse_code_rejects_any_unknown_key():
    pal = Palette(CLASSIC_PALETTE)
    code = pal.parse_code(list("rgby"))
    assert code is not None
    assert [c.key for c in code] == ["R", "G", "B", "Y"]
    assert pal.parse_code(list("RGXB")) is None


def test_duplicate_keys_differing_in_case_are_rejected():
    with pytest.raises(ValueError):
        Palette((Color("#abcdef"), Color("#ABCDEF")))


def test_draw_code_unique_has_no_repeats():
    pal = Palette(CLASSIC_PALETTE)
    rng = random.Random(8)
    for _ in range(20):
        assert len(set(pal.draw_code(rng, 4, unique=True))) == 4
    assert all(c in pal for c in pal.draw_code(rng, 6))
