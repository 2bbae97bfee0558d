"""
Testing pure scoring logic.
"""

import pytest

from mastermind.engine import Scorer, score_guess, is_win, masked_pins
from mastermind.errors import InvalidColor, LengthMismatch
from mastermind.types import Color, PegResult

RED, BLUE, GREEN = Color.RED, Color.BLUE, Color.GREEN
WHITE, YELLOW, ORANGE = Color.WHITE, Color.YELLOW, Color.ORANGE
B, W = PegResult.BLACK, PegResult.WHITE


def test_masked_pins_all_unused_returns_everything():
    pins = [GREEN, BLUE, BLUE, BLUE]
    assert masked_pins(pins, [True, True, True, True]) == [GREEN, BLUE, BLUE, BLUE]

def test_masked_pins_drops_used_positions():
    pins = [GREEN, BLUE, RED, BLUE]
    assert masked_pins(pins, [False, True, False, True]) == [BLUE, BLUE]

def test_one_color_in_wrong_position_gives_one_white():
    sut = Scorer([GREEN, BLUE, BLUE, BLUE])
    assert sut.check([RED, GREEN, RED, RED]) == [W]

def test_two_exact_matches_give_two_blacks():
    sut = Scorer([BLUE, BLUE, BLUE, BLUE])
    assert sut.check([BLUE, BLUE, RED, RED]) == [B, B]

def test_one_exact_match_gives_one_black():
    sut = Scorer([BLUE, BLUE, BLUE, BLUE])
    assert sut.check([BLUE, RED, RED, RED]) == [B]

def test_all_correct_gives_all_black():
    sut = Scorer([BLUE, GREEN, RED, WHITE])
    assert sut.check([BLUE, GREEN, RED, WHITE]) == [B, B, B, B]

def test_no_correct_colors_gives_empty_result():
    sut = Scorer([BLUE, BLUE, BLUE, BLUE])
    assert sut.check([RED, RED, RED, RED]) == []

def test_blacks_come_before_whites():
    sut = Scorer([RED, BLUE, GREEN, YELLOW])
    # white match at index 0, black match at index 3
    assert sut.check([BLUE, ORANGE, ORANGE, YELLOW]) == [B, W]

def test_duplicate_guess_colors_only_consume_one_secret_peg():
    # only one unused green in the secret, the guess has three
    sut = Scorer([GREEN, BLUE, BLUE, BLUE])
    assert sut.check([RED, GREEN, GREEN, GREEN]) == [W]

def test_duplicates_on_both_sides():
    sut = Scorer([RED, RED, BLUE, BLUE])
    assert sut.check([BLUE, RED, RED, GREEN]) == [B, W, W]

def test_exact_match_is_not_reused_as_white():
    sut = Scorer([RED, BLUE, GREEN, YELLOW])
    assert sut.check([RED, RED, RED, RED]) == [B]

def test_check_is_repeatable_and_does_not_touch_secret():
    secret = [RED, RED, BLUE, GREEN]
    sut = Scorer(secret)
    first = sut.check([RED, BLUE, RED, ORANGE])
    second = sut.check([RED, BLUE, RED, ORANGE])
    assert first == second
    assert sut.secret == (RED, RED, BLUE, GREEN)

def test_pegs_never_exceed_length():
    palette = list(Color)
    secret = [RED, GREEN, GREEN, ORANGE, WHITE]
    sut = Scorer(secret)
    for offset in range(len(palette)):
        guess = [palette[(offset + i) % len(palette)] for i in range(len(secret))]
        assert len(sut.check(guess)) <= len(secret)
    # same multiset of colors: every peg scores something
    assert len(sut.check(list(reversed(secret)))) == len(secret)

def test_scorer_accepts_color_names():
    sut = Scorer(["Red", "blue", "GREEN", "Yellow"])
    assert sut.secret == (RED, BLUE, GREEN, YELLOW)
    assert sut.check(["red", "orange", "yellow", "orange"]) == [B, W]

def test_scorer_rejects_unknown_secret_name():
    with pytest.raises(InvalidColor):
        Scorer(["Red", "Black", "Green", "Yellow"])

def test_check_rejects_unknown_guess_name():
    sut = Scorer([RED, BLUE, GREEN, YELLOW])
    with pytest.raises(InvalidColor):
        sut.check(["Red", "Blue", "Purple", "Yellow"])

def test_check_rejects_wrong_length():
    sut = Scorer([RED, BLUE, GREEN, YELLOW])
    with pytest.raises(LengthMismatch) as info:
        sut.check([RED, BLUE, GREEN])
    assert info.value.expected == 4
    assert info.value.actual == 3

def test_empty_secret_is_rejected():
    with pytest.raises(ValueError):
        Scorer([])

def test_injected_parser_is_used_for_text():
    calls = []

    def shouting_parser(text):
        calls.append(text)
        return Color(text.lower())

    sut = Scorer(["RED", BLUE], parser=shouting_parser)
    assert sut.check(["BLUE", "RED"]) == [W, W]
    assert calls == ["RED", "BLUE", "RED"]

def test_feedback_counts():
    sut = Scorer([RED, BLUE, GREEN, YELLOW])
    assert sut.feedback([BLUE, RED, YELLOW, GREEN]) == (0, 4)
    assert len(sut) == 4

def test_score_guess_counts_and_length_guard():
    assert score_guess([RED, RED, BLUE, BLUE], [RED, BLUE, RED, BLUE]) == (2, 2)
    with pytest.raises(LengthMismatch):
        score_guess([RED, RED], [RED])

def test_is_win_true_and_false():
    assert is_win([RED, BLUE, GREEN, WHITE], [RED, BLUE, GREEN, WHITE]) is True
    assert is_win([RED, BLUE, GREEN, WHITE], [RED, BLUE, GREEN, ORANGE]) is False
    assert is_win([RED, BLUE], [RED]) is False

def test_colors_pegs_and_strings_never_compare_equal():
    assert Color.WHITE != PegResult.WHITE
    assert Color.RED != "red"
    # a raw string is not a color, whatever its case
    assert is_win([RED], ["red"]) is False
    assert is_win([RED], ["RED"]) is False
