from __future__ import annotations

import itertools

import pytest
from aec_stream.codes import BGColor, Color, Effect, Reset
from aec_stream.style import Style, combine
from aec_stream.writer import serialize, serialize_style

ALL_CODES = [Reset.RESET, *Effect, *Color, *BGColor]
NON_RESET = [Effect.BOLD, Effect.ITALIC, Color.RED, Color.BLUE, BGColor.BG_CYAN, BGColor.BG_RED]


def test_of_sets_single_category() -> None:
    assert Style.of(Reset.RESET) == Style(reset=True)
    assert Style.of(Effect.BOLD) == Style(effect=Effect.BOLD)
    assert Style.of(Color.RED) == Style(color=Color.RED)
    assert Style.of(BGColor.BG_BLUE) == Style(bgcolor=BGColor.BG_BLUE)


def test_of_rejects_non_codes() -> None:
    with pytest.raises(TypeError, match="Expected an escape code"):
        Style.of(31)  # type: ignore[arg-type]


def test_merge_same_code_is_idempotent() -> None:
    for code in ALL_CODES:
        assert Style.of(code).merge(code) == Style.of(code)
        assert combine(code, code) == Style.of(code)


def test_merge_associative_without_reset() -> None:
    for a, b, c in itertools.product(NON_RESET, repeat=3):
        left = combine(a, b).merge(c)
        right = Style.of(a).merge(combine(b, c))
        assert left == right


def test_reset_clears_only_earlier_terms() -> None:
    style = combine(Color.RED, Reset.RESET, Effect.BOLD)
    assert style == Style(reset=True, effect=Effect.BOLD)
    assert serialize(style) == "\x1b[0m\x1b[1m"
    assert serialize(style) != serialize(Effect.BOLD)


def test_reset_order_matters() -> None:
    assert combine(Color.RED, Reset.RESET) == Style(reset=True)
    assert combine(Reset.RESET, Color.RED) == Style(reset=True, color=Color.RED)
    assert combine(Color.RED, Reset.RESET, BGColor.BG_BLUE) == Style(reset=True, bgcolor=BGColor.BG_BLUE)


def test_same_category_last_wins() -> None:
    assert serialize(combine(Color.RED, Color.BLUE)) == serialize(Style.of(Color.BLUE))
    assert combine(Effect.ITALIC, Effect.BOLD).effect is Effect.BOLD
    assert combine(BGColor.BG_RED, BGColor.BG_CYAN).bgcolor is BGColor.BG_CYAN


def test_category_order_is_fixed() -> None:
    a = combine(BGColor.BG_CYAN, combine(Effect.BOLD, Color.RED))
    b = combine(Color.RED, combine(Effect.BOLD, BGColor.BG_CYAN))
    assert serialize(a) == serialize(b) == "\x1b[1;31;46m"


def test_last_value_of_each_type_is_used() -> None:
    style = combine(Effect.ITALIC, Effect.BOLD, Color.BLUE, BGColor.BG_RED, Color.RED, BGColor.BG_CYAN)
    assert style == Style(effect=Effect.BOLD, color=Color.RED, bgcolor=BGColor.BG_CYAN)


def test_plus_operators() -> None:
    assert Style.of(Color.BLUE) + Effect.ITALIC == Style(effect=Effect.ITALIC, color=Color.BLUE)
    assert Effect.ITALIC + Style.of(Color.YELLOW) == Style(effect=Effect.ITALIC, color=Color.YELLOW)
    assert Color.RED + Style.of(Reset.RESET) == Style(reset=True)

    style = Style.of(Color.RED)
    alias = style
    style += BGColor.BG_GREEN
    assert style is alias
    assert style == Style(color=Color.RED, bgcolor=BGColor.BG_GREEN)

    with pytest.raises(TypeError):
        Style() + 1  # type: ignore[operator]


def test_merge_does_not_mutate_operands() -> None:
    a = Style.of(Color.RED)
    b = Style(reset=True, effect=Effect.DIM)
    merged = a.merge(b)
    assert a == Style(color=Color.RED)
    assert b == Style(reset=True, effect=Effect.DIM)
    assert merged == b
    assert merged is not b


def test_setters_and_unsetters() -> None:
    style = Style()
    style.set_effect(Effect.UNDERLINE)
    style.set_color(Color.GREEN)
    style.set_bgcolor(BGColor.BG_BLACK)
    assert style.parameters() == [4, 32, 40]

    style.unset_color()
    assert style.parameters() == [4, 40]
    style.unset_effect()
    style.unset_bgcolor()
    assert style.is_empty()

    style.set_color(Color.CYAN)
    style.set_reset()
    assert style == Style(reset=True)
    assert not style.is_empty()


def test_empty_style_is_identity_without_reset() -> None:
    for code in NON_RESET:
        assert Style().merge(code) == Style.of(code)
        assert Style.of(code).merge(Style()) == Style.of(code)
    assert combine() == Style()
    assert serialize_style(Style()) == ""


def test_parameters_recover_set_categories() -> None:
    cases = [
        (Style(effect=Effect.BLINK), [5]),
        (Style(color=Color.BRIGHT_RED), [91]),
        (Style(bgcolor=BGColor.BG_BRIGHT_BLUE), [104]),
        (Style(effect=Effect.CONCEAL, bgcolor=BGColor.BG_CRESET), [8, 49]),
        (Style(reset=True, color=Color.CRESET, bgcolor=BGColor.BG_GRAY), [39, 47]),
    ]
    for style, expected in cases:
        seq = serialize_style(style).split("\x1b[")[-1]
        assert seq.endswith("m")
        assert [int(p) for p in seq[:-1].split(";")] == expected
