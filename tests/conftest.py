# pytest configuration

from pytest import fixture

from graphql_support import GraphQLSupport

from .greeting_schema import greeting_schema


@fixture
def support():
    return GraphQLSupport(greeting_schema)
