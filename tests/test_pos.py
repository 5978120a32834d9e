from graphql import SourceLocation

from graphql_support import Pos


def describe_pos():
    def has_line_and_column():
        pos = Pos(2, 5)
        assert pos.line == 2
        assert pos.column == 5
        assert pos == (2, 5)

    def can_be_formatted():
        assert Pos(2, 5).formatted == {"line": 2, "column": 5}

    def can_be_created_from_a_formatted_location():
        assert Pos.from_location({"line": 2, "column": 5}) == Pos(2, 5)

    def can_be_created_from_a_source_location():
        assert Pos.from_location(SourceLocation(2, 5)) == Pos(2, 5)

    def converts_to_and_from_formatted_locations_without_loss():
        for line, column in [(1, 1), (3, 14), (159, 26)]:
            pos = Pos(line, column)
            assert Pos.from_location(pos.formatted) == pos

    def compares_with_source_locations():
        assert Pos(2, 5) == SourceLocation(2, 5)
        assert Pos(2, 5) != SourceLocation(5, 2)

    def is_hashable():
        assert len({Pos(1, 2), Pos(1, 2), Pos(2, 1)}) == 2

    def prints_line_and_column():
        assert str(Pos(2, 5)) == "(line 2, column 5)"
