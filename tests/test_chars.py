"""Test character classification and the punctuation tables."""

from cjklint.chars import (
    FULL_TO_HALF,
    HALF_QUOTE_TO_FULL,
    HALF_TO_FULL,
    TO_SIMPLIFIED,
    TO_TRADITIONAL,
    Role,
    Width,
    classify,
    is_half_alnum,
)


class TestWidth:
    def test_cjk_letter_is_full(self):
        assert classify("中").width is Width.FULL

    def test_latin_letter_is_half(self):
        assert classify("a").width is Width.HALF

    def test_fullwidth_digit(self):
        cls = classify("１")
        assert cls.width is Width.FULL
        assert cls.role is Role.DIGIT

    def test_curly_quotes_are_full(self):
        assert classify("“").width is Width.FULL
        assert classify("’").width is Width.FULL

    def test_space_and_linebreak_are_neutral(self):
        assert classify(" ").width is Width.NEUTRAL
        assert classify("\n").width is Width.NEUTRAL


class TestRole:
    def test_letters_and_digits(self):
        assert classify("a").role is Role.LETTER
        assert classify("中").role is Role.LETTER
        assert classify("7").role is Role.DIGIT

    def test_punctuation(self):
        assert classify(",").role is Role.PUNCTUATION
        assert classify("，").role is Role.PUNCTUATION
        assert classify("、").role is Role.PUNCTUATION

    def test_ambiguous_quotes(self):
        assert classify('"').role is Role.QUOTE
        assert classify("'").role is Role.QUOTE

    def test_directional_quotes(self):
        assert classify("「").role is Role.QUOTE_OPEN
        assert classify("」").role is Role.QUOTE_CLOSE
        assert classify("‘").role is Role.QUOTE_OPEN

    def test_brackets(self):
        assert classify("(").role is Role.BRACKET_OPEN
        assert classify("（").role is Role.BRACKET_OPEN
        assert classify("】").role is Role.BRACKET_CLOSE

    def test_symbols(self):
        assert classify("/").role is Role.SYMBOL
        assert classify("《").role is Role.SYMBOL

    def test_whitespace(self):
        assert classify("\t").role is Role.SPACE
        assert classify("\r").role is Role.LINEBREAK


class TestHelpers:
    def test_is_half_alnum(self):
        assert is_half_alnum("a")
        assert is_half_alnum("9")
        assert not is_half_alnum("中")
        assert not is_half_alnum(".")
        assert not is_half_alnum("")


class TestTables:
    def test_half_full_punctuation(self):
        assert HALF_TO_FULL[","] == "，"
        assert FULL_TO_HALF["（"] == "("

    def test_quote_pairs(self):
        assert HALF_QUOTE_TO_FULL['"'] == ("“", "”")

    def test_unification_tables_are_inverse(self):
        for traditional, simplified in TO_SIMPLIFIED.items():
            assert TO_TRADITIONAL[simplified] == traditional
