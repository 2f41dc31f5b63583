"""Unit tests for the single-byte matcher: constructors, conversion, case folding."""

import dataclasses

import pytest

from asciibool import AsciiBytePair, InvalidInputError
from asciibool.errors import INVALID_REPRESENTATION


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tf_pair():
    """Return the lowercase t/f pair."""
    return AsciiBytePair.new_tf()


# Named constructors
# ---------------------------------------------------------------------------


def test_default_pair_converts_correctly():
    """Default pair maps '1' to True and '0' to False."""
    pair = AsciiBytePair.default()
    assert pair.convert(ord("1")) is True
    assert pair.convert(ord("0")) is False


def test_default_rejects_other_bytes():
    """Bytes outside the pair raise InvalidInputError with the fixed message."""
    pair = AsciiBytePair.default()
    with pytest.raises(InvalidInputError) as exc_info:
        pair.convert(ord("2"))
    assert str(exc_info.value) == INVALID_REPRESENTATION
    assert exc_info.value.value == ord("2")


def test_invalid_input_is_a_value_error():
    """InvalidInputError can be caught as a plain ValueError."""
    with pytest.raises(ValueError):
        AsciiBytePair.default().convert(ord("x"))


def test_no_arg_constructor_equals_default():
    """Constructing without arguments gives the default pair."""
    assert AsciiBytePair() == AsciiBytePair.default()


@pytest.mark.parametrize(
    "factory, true_byte, false_byte",
    [
        (AsciiBytePair.new_yn, b"y", b"n"),
        (AsciiBytePair.new_tf, b"t", b"f"),
        (AsciiBytePair.new_ox, b"o", b"x"),
    ],
)
def test_named_pairs_convert_correctly(factory, true_byte, false_byte):
    """Each named pair accepts its own true and false byte."""
    pair = factory()
    assert pair.convert(true_byte[0]) is True
    assert pair.convert(false_byte[0]) is False


def test_custom_pair_accepts_ints_and_single_bytes():
    """new_custom normalises one-byte bytes arguments to ints."""
    pair = AsciiBytePair.new_custom(b"+", ord("-"))
    assert pair.true_value == ord("+")
    assert pair.false_value == ord("-")
    assert pair.convert(ord("+")) is True
    assert pair.convert(ord("-")) is False


def test_custom_pair_accepts_single_bytearray():
    """A one-byte bytearray is normalised like bytes."""
    pair = AsciiBytePair.new_custom(bytearray(b"y"), bytearray(b"n"))
    assert pair == AsciiBytePair.new_yn()


def test_constructor_rejects_multi_byte_values():
    """A bytes argument must be exactly one byte long."""
    with pytest.raises(TypeError):
        AsciiBytePair.new_custom(b"ab", b"c")


def test_constructor_rejects_out_of_range_values():
    """Int arguments must fit in one byte."""
    with pytest.raises(ValueError):
        AsciiBytePair.new_custom(256, 0)


def test_equal_true_and_false_values_favour_true():
    """A degenerate pair with equal values always converts that byte to True."""
    pair = AsciiBytePair.new_custom(b"a", b"a")
    assert pair.convert(ord("a")) is True


def test_pair_is_immutable_value():
    """Pairs are frozen and compare and hash by value."""
    pair = AsciiBytePair.new_yn()
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.true_value = ord("z")
    assert pair == AsciiBytePair.new_custom(b"y", b"n")
    assert len({pair, AsciiBytePair.new_yn()}) == 1


# Presence pairs
# ---------------------------------------------------------------------------


def test_new_from_true_value_converts_correctly():
    """Presence pair: true byte is True, zero byte is False, anything else fails."""
    pair = AsciiBytePair.new_from_true_value(ord("o"))
    assert pair.convert(ord("o")) is True
    assert pair.convert(0) is False
    with pytest.raises(InvalidInputError):
        pair.convert(ord("x"))


def test_new_o_is_equivalent_to_new_from_true_value():
    """new_o is shorthand for a presence pair on 'o'."""
    assert AsciiBytePair.new_o() == AsciiBytePair.new_from_true_value(b"o")


def test_new_o_capital_is_case_sensitive():
    """new_o_capital accepts 'O' and the sentinel but rejects 'o'."""
    pair = AsciiBytePair.new_o_capital()
    assert pair.convert(ord("O")) is True
    assert pair.convert(0) is False
    with pytest.raises(InvalidInputError):
        pair.convert(ord("o"))


def test_new_x_and_new_x_capital():
    """x presence pairs distinguish case."""
    assert AsciiBytePair.new_x().convert(ord("x")) is True
    assert AsciiBytePair.new_x_capital().convert(ord("X")) is True
    with pytest.raises(InvalidInputError):
        AsciiBytePair.new_x().convert(ord("X"))
    with pytest.raises(InvalidInputError):
        AsciiBytePair.new_x_capital().convert(ord("x"))


# Case transforms
# ---------------------------------------------------------------------------


def test_into_lower_and_into_upper_work(tf_pair):
    """into_lower / into_upper fold both configured bytes."""
    lower = tf_pair.into_lower()
    assert lower.true_value == ord("t")
    assert lower.false_value == ord("f")

    upper = tf_pair.into_upper()
    assert upper.true_value == ord("T")
    assert upper.false_value == ord("F")


def test_into_upper_converts_uppercase_input(tf_pair):
    """An uppercased t/f pair accepts 'T' and 'F'."""
    upper = tf_pair.into_upper()
    assert upper.convert(ord("T")) is True
    assert upper.convert(ord("F")) is False


def test_case_transforms_are_idempotent():
    """Applying a fold twice gives the same pair as applying it once."""
    pair = AsciiBytePair.new_custom(b"Y", b"n")
    assert pair.into_lower().into_lower() == pair.into_lower()
    assert pair.into_upper().into_upper() == pair.into_upper()


def test_case_transforms_leave_non_letters_alone():
    """Digits and the presence sentinel are unchanged by folding."""
    assert AsciiBytePair.default().into_upper() == AsciiBytePair.default()
    assert AsciiBytePair.new_x().into_upper() == AsciiBytePair.new_x_capital()
    assert AsciiBytePair.new_x_capital().into_lower().false_value == 0


def test_case_transforms_do_not_mutate_original(tf_pair):
    """Folding returns a new pair."""
    tf_pair.into_upper()
    assert tf_pair == AsciiBytePair.new_tf()


# convert_lower
# ---------------------------------------------------------------------------


def test_convert_lower_transforms_input(tf_pair):
    """Uppercase input matches a lowercase pair through convert_lower."""
    assert tf_pair.convert_lower(ord("t")) is True
    assert tf_pair.convert_lower(ord("T")) is True
    assert tf_pair.convert_lower(ord("F")) is False


def test_convert_lower_only_folds_ascii_letters():
    """Non-letter bytes pass through unchanged."""
    pair = AsciiBytePair.default()
    assert pair.convert_lower(ord("1")) is True
    with pytest.raises(InvalidInputError):
        # 0xC0 has no ASCII lowercase form and is not 0xE0 afterwards
        AsciiBytePair.new_custom(0xE0, 0).convert_lower(0xC0)


def test_convert_lower_still_rejects_unknown(tf_pair):
    """convert_lower raises for bytes outside the pair."""
    with pytest.raises(InvalidInputError):
        tf_pair.convert_lower(ord("Q"))


# convert_ascii_char
# ---------------------------------------------------------------------------


def test_convert_ascii_char_accepts_single_byte_chars():
    """Characters in 0..255 are narrowed and classified."""
    pair = AsciiBytePair.new_yn()
    assert pair.convert_ascii_char("y") is True
    assert pair.convert_ascii_char("n") is False


def test_convert_ascii_char_latin1_mismatch_uses_fixed_message():
    """A narrowable char that does not match gets the plain message."""
    with pytest.raises(InvalidInputError) as exc_info:
        AsciiBytePair.new_yn().convert_ascii_char("é")
    assert str(exc_info.value) == INVALID_REPRESENTATION


def test_convert_ascii_char_rejects_wide_chars():
    """Code points above 255 fail with the character in the message."""
    pair = AsciiBytePair.new_yn()
    with pytest.raises(InvalidInputError) as exc_info:
        pair.convert_ascii_char("€")
    assert str(exc_info.value) == "Invalid boolean representation: €"
    assert exc_info.value.value == "€"


def test_convert_ascii_char_rejects_wide_chars_for_any_pair():
    """Wide characters fail regardless of configuration."""
    for pair in (AsciiBytePair.default(), AsciiBytePair.new_x(), AsciiBytePair(0, 0)):
        with pytest.raises(InvalidInputError):
            pair.convert_ascii_char("あ")


def test_convert_ascii_char_rejects_non_single_characters():
    """Empty or multi-character strings are invalid."""
    pair = AsciiBytePair.new_yn()
    with pytest.raises(InvalidInputError, match="Invalid boolean representation: yes"):
        pair.convert_ascii_char("yes")
    with pytest.raises(InvalidInputError):
        pair.convert_ascii_char("")


def test_convert_ascii_char_lower_folds_before_narrowing():
    """Uppercase characters match a lowercase pair."""
    pair = AsciiBytePair.new_yn()
    assert pair.convert_ascii_char_lower("Y") is True
    assert pair.convert_ascii_char_lower("N") is False


def test_convert_ascii_char_lower_is_unicode_aware():
    """Latin-1 capitals and the Kelvin sign fold to matching bytes."""
    assert AsciiBytePair.new_custom(0xE0, 0).convert_ascii_char_lower("À") is True
    assert AsciiBytePair.new_custom(b"k", b"n").convert_ascii_char_lower("\u212a") is True


def test_convert_ascii_char_lower_error_shows_original_char():
    """A char that lowers to two characters is reported as passed in."""
    pair = AsciiBytePair.new_custom(b"i", b"n")
    with pytest.raises(InvalidInputError) as exc_info:
        pair.convert_ascii_char_lower("İ")
    assert str(exc_info.value) == "Invalid boolean representation: İ"
    assert exc_info.value.value == "İ"
