from pytest import raises

from graphql_support import ExecutionConfig, GraphQLSupport, Pos

from ..greeting_schema import greeting_data, greeting_schema


def describe_graphql_support():
    def binds_the_schema(support):
        assert support.schema is greeting_schema
        assert support.config is None

    def has_a_repr(support):
        assert repr(support).startswith("<GraphQLSupport ")

    def executes_test_queries(support):
        result = support.execute_test_query(greeting_data, "{ hello }")
        assert result == {"data": {"hello": "world"}}

    def executes_test_queries_with_variables(support):
        result = support.execute_test_query(
            greeting_data,
            "query ($name: String!) { greet(name: $name) }",
            {"name": "Alan"},
        )
        assert result == {"data": {"greet": "Hello, Alan!"}}

    def checks_results(support):
        support.check(greeting_data, "{ hello }", {"data": {"hello": "world"}})
        with raises(AssertionError):
            support.check(greeting_data, "{ hello }", {"data": {"hello": "moon"}})

    def checks_errors(support):
        support.check_errors(
            greeting_data,
            "{ boom }",
            {"boom": None},
            [{"message": "boom", "path": ["boom"]}],
            no_location=True,
        )

    def checks_contained_errors(support):
        support.check_contains_errors(
            greeting_data, "{ boom }", {"boom": None}, [("bo", [Pos(1, 3)])]
        )

    def checks_contained_violations(support):
        support.check_contains_violations(
            lambda: support.execute_test_query(greeting_data, "{ unknown }"),
            [("'unknown'", [Pos(1, 3)])],
        )

    def uses_the_bound_config():
        support = GraphQLSupport(
            greeting_schema, ExecutionConfig(context_value={"user_id": "1"})
        )
        support.check(
            greeting_data, "{ me { name } }", {"data": {"me": {"name": "Ada"}}}
        )
        support.check(
            greeting_data,
            "{ me { name } }",
            {"data": {"me": {"name": "Alan"}}},
            context_value={"user_id": "2"},
        )
