"""Test spaces inside and outside brackets."""

from cjklint.report import Target
from cjklint.rules.space_bracket import MESSAGES

from .conftest import output, run, spots


class TestInside:
    def test_already_tight(self):
        result = run("foo (bar) baz", noSpaceInsideBracket=True)
        assert result.result == "foo (bar) baz"
        assert result.validations == []

    def test_half_width(self):
        result = run("foo ( bar ) baz", noSpaceInsideBracket=True)
        assert result.result == "foo (bar) baz"
        assert spots(result) == [(5, 1, Target.INNER_SPACE_BEFORE), (9, 1, Target.SPACE_AFTER)]
        assert {v.message for v in result.validations} == {MESSAGES.no_inside}

    def test_full_width(self):
        opts = {"noSpaceInsideBracket": True}
        assert output("foo （bar） baz", **opts) == "foo （bar） baz"
        assert output("foo （ bar ） baz", **opts) == "foo （bar） baz"


class TestOutside:
    def test_half_space(self):
        opts = {"spaceOutsideHalfBracket": True}
        assert output("foo(bar)baz", **opts) == "foo (bar) baz"
        assert output("foo ( bar ) baz", **opts) == "foo ( bar ) baz"

    def test_half_no_space(self):
        opts = {"spaceOutsideHalfBracket": False}
        assert output("foo(bar)baz", **opts) == "foo(bar)baz"
        assert output("foo ( bar ) baz", **opts) == "foo( bar )baz"

    def test_full_no_space(self):
        assert output("foo （ bar ） baz", noSpaceOutsideFullBracket=True) == "foo（ bar ）baz"

    def test_bracket_before_punctuation(self):
        assert output("中文 (foo)，", spaceOutsideHalfBracket=True) == "中文 (foo)，"
