from pytest import raises

from graphql_support import check, check_errors

from ..greeting_schema import greeting_data, greeting_schema as schema


boom_error = {
    "message": "boom",
    "locations": [{"line": 1, "column": 3}],
    "path": ["boom"],
}
other_error = {
    "message": "boom",
    "locations": [{"line": 1, "column": 8}],
    "path": ["other"],
}


def describe_check():
    def passes_for_the_expected_result():
        result = check(
            schema, greeting_data, "{ hello }", {"data": {"hello": "world"}}
        )
        assert result == {"data": {"hello": "world"}}

    def passes_for_expected_errors():
        check(
            schema,
            greeting_data,
            "{ boom }",
            {"data": {"boom": None}, "errors": [boom_error]},
        )

    def passes_the_variables():
        check(
            schema,
            greeting_data,
            "query ($name: String!) { greet(name: $name) }",
            {"data": {"greet": "Hello, Ada!"}},
            {"name": "Ada"},
        )

    def fails_with_a_rendering_of_the_actual_result():
        with raises(AssertionError) as exc_info:
            check(schema, greeting_data, "{ hello }", {"data": {"hello": "moon"}})
        assert str(exc_info.value) == (
            'Unexpected result:\n{\n  "data": {\n    "hello": "world"\n  }\n}'
        )

    def fails_for_missing_errors():
        with raises(AssertionError):
            check(schema, greeting_data, "{ boom }", {"data": {"boom": None}})

    def does_not_match_strings_with_numbers():
        with raises(AssertionError):
            check(schema, {"hello": "1"}, "{ hello }", {"data": {"hello": 1}})


def describe_check_errors():
    def passes_for_the_expected_errors():
        result = check_errors(
            schema,
            greeting_data,
            "{ hello boom }",
            {"hello": "world", "boom": None},
            [
                {
                    "message": "boom",
                    "locations": [{"line": 1, "column": 9}],
                    "path": ["boom"],
                }
            ],
        )
        assert result["data"] == {"hello": "world", "boom": None}

    def passes_for_no_errors():
        check_errors(schema, greeting_data, "{ hello }", {"hello": "world"}, [])

    def ignores_the_order_of_the_errors():
        query = "{ boom other: boom }"
        data = {"boom": None, "other": None}
        check_errors(schema, greeting_data, query, data, [boom_error, other_error])
        check_errors(schema, greeting_data, query, data, [other_error, boom_error])

    def fails_for_unexpected_data():
        with raises(AssertionError) as exc_info:
            check_errors(
                schema, greeting_data, "{ boom }", {"boom": "bang"}, [boom_error]
            )
        assert str(exc_info.value).startswith("Unexpected data in result:\n")

    def fails_for_missing_errors():
        with raises(AssertionError) as exc_info:
            check_errors(
                schema, greeting_data, "{ hello }", {"hello": "world"}, [boom_error]
            )
        assert str(exc_info.value) == "Expected 1 errors, got 0:\n[]"

    def fails_for_too_many_errors():
        with raises(AssertionError):
            check_errors(
                schema,
                greeting_data,
                "{ boom other: boom }",
                {"boom": None, "other": None},
                [boom_error],
            )

    def fails_for_different_errors():
        with raises(AssertionError) as exc_info:
            check_errors(
                schema,
                greeting_data,
                "{ boom }",
                {"boom": None},
                [dict(boom_error, message="bang")],
            )
        assert str(exc_info.value).startswith("Expected error not found:\n")

    def matches_each_reported_error_only_once():
        with raises(AssertionError):
            check_errors(
                schema,
                greeting_data,
                "{ boom other: boom }",
                {"boom": None, "other": None},
                [boom_error, boom_error],
            )

    def checks_recovered_violations():
        check_errors(
            schema,
            greeting_data,
            "{ unknown }",
            None,
            [
                {
                    "message": "Cannot query field 'unknown' on type 'Query'.",
                    "locations": [{"line": 1, "column": 3}],
                }
            ],
            recover_violations=True,
        )
