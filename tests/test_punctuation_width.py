"""Test conversion of punctuation between half-width and full-width forms."""

from cjklint.options import Options
from cjklint.report import Target
from cjklint.rules import punctuation_width
from cjklint.rules.punctuation_width import FULL_WIDTH, HALF_WIDTH

from .conftest import output, run, spots

RULES = {
    "halfWidthPunctuation": "()",
    "fullWidthPunctuation": "，。：；？！“”‘’",
}


class TestPauseAndStop:
    def test_after_cjk(self):
        result = run("你好,再见.", **RULES)
        assert result.result == "你好，再见。"
        assert spots(result) == [(2, 1, Target.CONTENT), (5, 1, Target.CONTENT)]
        assert {v.message for v in result.validations} == {FULL_WIDTH}

    def test_after_latin_kept(self):
        assert output("foo, bar.", **RULES) == "foo, bar."

    def test_runs_never_convert(self):
        assert output("中文...", **RULES) == "中文..."

    def test_to_half_after_latin(self):
        result = run("foo，bar", halfWidthPunctuation=",")
        assert result.result == "foo,bar"
        assert result.validations[0].message == HALF_WIDTH

    def test_to_half_after_cjk_kept(self):
        assert output("中文，bar", halfWidthPunctuation=",") == "中文，bar"


class TestPairs:
    def test_brackets(self):
        assert output("你（好）,再见.", **RULES) == "你(好)，再见。"

    def test_single_quotes(self):
        assert output("你'好',再见.", **RULES) == "你‘好’，再见。"

    def test_double_quotes(self):
        result = run('你"好"', **RULES)
        assert result.result == "你“好”"
        assert spots(result) == [(1, 1, Target.START_CONTENT), (3, 1, Target.END_CONTENT)]

    def test_nested_quotes(self):
        assert output('"你\'好\'",再见.', **RULES) == "“你‘好’”，再见。"

    def test_quotes_to_half(self):
        assert output("foo “bar”", halfWidthPunctuation='"') == 'foo "bar"'

    def test_apostrophe_kept(self):
        assert output("what's up", **RULES) == "what's up"


class TestConfigure:
    def test_undefined(self):
        assert punctuation_width.configure(Options()) is None

    def test_full_wins_when_listed_twice(self):
        config = punctuation_width.configure(
            Options({"halfWidthPunctuation": ",", "fullWidthPunctuation": "，"})
        )
        assert config is not None
        assert dict(config.to_full) == {",": "，"}
        assert dict(config.to_half) == {}
