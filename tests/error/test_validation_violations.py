from graphql import GraphQLError, Source

from graphql_support import ValidationViolations


source = Source("{ foo bar }")
violations = [
    GraphQLError("Unknown field 'foo'.", source=source, positions=[2]),
    GraphQLError("Unknown field 'bar'.", source=source, positions=[6]),
]


def describe_validation_violations():
    def keeps_the_violations():
        error = ValidationViolations(violations)
        assert error.violations == violations
        assert error.violations is not violations

    def is_an_exception():
        assert isinstance(ValidationViolations(violations), Exception)

    def prints_the_messages_of_the_violations():
        assert str(ValidationViolations(violations)) == (
            "Unknown field 'foo'.\nUnknown field 'bar'."
        )

    def has_a_repr():
        assert repr(ValidationViolations(violations[:1])) == (
            "ValidationViolations([GraphQLError(\"Unknown field 'foo'.\","
            " locations=[SourceLocation(line=1, column=3)])])"
        )

    def formats_the_violations():
        assert ValidationViolations(violations).formatted == [
            {
                "message": "Unknown field 'foo'.",
                "locations": [{"line": 1, "column": 3}],
            },
            {
                "message": "Unknown field 'bar'.",
                "locations": [{"line": 1, "column": 7}],
            },
        ]

    def formats_violations_without_locations():
        error = ValidationViolations([GraphQLError("Something is wrong.")])
        assert error.formatted == [{"message": "Something is wrong."}]
