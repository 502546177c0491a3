"""Test neighbour queries and group removal on the token arena."""

from cjklint.render import render


class TestVisibility:
    def test_marks_are_skipped(self, sequence):
        seq = sequence("a **b**")
        assert seq.visible_after(0) == 2
        assert seq.visible_before(2) == 0

    def test_stops_at_linebreak(self, sequence):
        seq = sequence("a\nb")
        assert seq.visible_before(2) is None
        assert seq.visible_after(0) is None

    def test_edges(self, sequence):
        seq = sequence("a")
        assert seq.visible_before(0) is None
        assert seq.visible_after(0) is None


class TestSpaceHost:
    def test_before_opening_mark(self, sequence):
        seq = sequence("a **b**")
        assert seq.space_host(0, 2) == 0

    def test_after_closing_mark(self, sequence):
        seq = sequence("**a** b")
        assert seq.space_host(1, 3) == 2

    def test_between_closing_and_opening(self, sequence):
        seq = sequence("**a** _b_")
        assert seq.space_host(1, 4) == 2


class TestQueries:
    def test_content_before_any_depth(self, sequence):
        seq = sequence("中文（好）,")
        assert seq.content_before(4) == 2

    def test_content_before_stops_at_linebreak(self, sequence):
        seq = sequence("a\n,")
        assert seq.content_before(2) is None

    def test_touches_linebreak(self, sequence):
        seq = sequence("a \nb")
        assert seq.touches_linebreak(0)
        assert seq.touches_linebreak(1)
        assert not seq.touches_linebreak(2)

    def test_opener_closer(self, sequence):
        seq = sequence("(a)")
        assert seq.is_opener(0)
        assert seq.is_closer(2)
        assert not seq.is_opener(1)
        assert seq.group_at(2) is seq.groups[0]


class TestRemoveGroup:
    def test_removes_marks_children_and_spaces(self, sequence):
        seq = sequence('"a" b')
        seq.remove_group(seq.groups[0])
        assert render(seq) == "b"
        assert seq.group_at(0) is None
        assert not seq.is_visible(1)
        assert seq.visible_before(3) is None

    def test_removes_nested_groups(self, sequence):
        seq = sequence("(a **b**) c")
        outer = seq.groups[0]
        seq.remove_group(outer)
        assert render(seq) == "c"
        assert seq.group_at(2) is None
