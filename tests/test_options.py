# -*- coding: utf-8 -*-

import pytest

from py_gql_http import GraphQLOptions


def test_defaults(products_schema):
    options = GraphQLOptions(products_schema)
    assert options.schema is products_schema
    assert options.graphiql is False
    assert options.endpoint_url == "/graphiql"
    assert options.on_response is None
    assert options.hide_errors is False
    assert options.context is None
    assert options.root is None
    assert options.middlewares == ()


def test_schema_is_required():
    with pytest.raises(ValueError):
        GraphQLOptions(None)


@pytest.mark.parametrize("endpoint_url", ["", "graphiql"])
def test_endpoint_url_must_be_absolute(products_schema, endpoint_url):
    with pytest.raises(ValueError):
        GraphQLOptions(products_schema, endpoint_url=endpoint_url)


def test_endpoint_url_trailing_slash_is_dropped(products_schema):
    options = GraphQLOptions(products_schema, endpoint_url="/explore/")
    assert options.endpoint_url == "/explore"


def test_hooks_must_be_callable(products_schema):
    with pytest.raises(TypeError):
        GraphQLOptions(products_schema, on_response="foo")
    with pytest.raises(TypeError):
        GraphQLOptions(products_schema, context=42)


def test_from_env_defaults(products_schema):
    options = GraphQLOptions.from_env(products_schema, environ={})
    assert options.graphiql is False
    assert options.endpoint_url == "/graphiql"
    assert options.hide_errors is False


def test_from_env(products_schema):
    options = GraphQLOptions.from_env(
        products_schema,
        environ={
            "GRAPHQL_GRAPHIQL": "true",
            "GRAPHQL_ENDPOINT_URL": "/explore",
            "GRAPHQL_HIDE_ERRORS": "1",
        },
    )
    assert options.graphiql is True
    assert options.endpoint_url == "/explore"
    assert options.hide_errors is True


def test_from_env_production_hides_errors(products_schema):
    options = GraphQLOptions.from_env(
        products_schema, environ={"GRAPHQL_ENV": "Production"}
    )
    assert options.hide_errors is True


def test_from_env_explicit_flag_wins_over_production(products_schema):
    options = GraphQLOptions.from_env(
        products_schema,
        environ={"GRAPHQL_ENV": "production", "GRAPHQL_HIDE_ERRORS": "off"},
    )
    assert options.hide_errors is False


def test_from_env_overrides(products_schema):
    options = GraphQLOptions.from_env(
        products_schema, environ={"GRAPHQL_GRAPHIQL": "yes"}, graphiql=False
    )
    assert options.graphiql is False


def test_from_env_invalid_flag(products_schema):
    with pytest.raises(ValueError) as exc_info:
        GraphQLOptions.from_env(
            products_schema, environ={"GRAPHQL_GRAPHIQL": "maybe"}
        )
    assert "GRAPHQL_GRAPHIQL" in str(exc_info.value)
