# -*- coding: utf-8 -*-

import pytest

from py_gql_http import GraphQLBody, GraphQLOptions, RequestContext
from py_gql_http.routing import (
    Route,
    classify,
    graphql_endpoint,
    is_graphiql_path,
)

HTML = {"Accept": "text/html,application/xhtml+xml,*/*;q=0.8"}
JSON = {"Accept": "application/json"}

QUERY = GraphQLBody("{ products { name } }")


@pytest.fixture
def options(products_schema):
    return GraphQLOptions(products_schema, graphiql=True)


@pytest.mark.parametrize(
    "path", ["/users/graphiql", "/users/brendan/graphiql", "/graphiql/"]
)
def test_browser_navigation_to_graphiql(options, path):
    assert classify(RequestContext("GET", path, HTML), options) is (
        Route.GRAPHIQL
    )


def test_graphiql_takes_precedence_over_body(options):
    ctx = RequestContext("GET", "/users/graphiql", HTML, body=QUERY)
    assert classify(ctx, options) is Route.GRAPHIQL


def test_graphiql_disabled(products_schema):
    options = GraphQLOptions(products_schema)
    ctx = RequestContext("GET", "/users/graphiql", HTML)
    assert classify(ctx, options) is Route.MISSING_QUERY


def test_json_client_on_graphiql_path_executes(options):
    ctx = RequestContext("GET", "/users/graphiql", JSON, body=QUERY)
    assert classify(ctx, options) is Route.EXECUTE


def test_post_on_graphiql_path_executes(options):
    ctx = RequestContext("POST", "/users/graphiql", HTML, body=QUERY)
    assert classify(ctx, options) is Route.EXECUTE


def test_browser_on_other_path(options):
    ctx = RequestContext("GET", "/users/brendan", HTML)
    assert classify(ctx, options) is Route.MISSING_QUERY


def test_custom_endpoint_url(products_schema):
    options = GraphQLOptions(
        products_schema, graphiql=True, endpoint_url="/explore"
    )
    assert classify(RequestContext("GET", "/api/explore", HTML), options) is (
        Route.GRAPHIQL
    )
    assert classify(RequestContext("GET", "/api/graphiql", HTML), options) is (
        Route.MISSING_QUERY
    )


def test_empty_query_is_executed(options):
    ctx = RequestContext("POST", "/users", JSON, body=GraphQLBody(""))
    assert classify(ctx, options) is Route.EXECUTE


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/graphiql", True),
        ("users/graphiql", True),
        ("/users/graphiql/", True),
        ("/users/mygraphiql", False),
        ("/graphiql/users", False),
    ],
)
def test_is_graphiql_path(path, expected):
    assert is_graphiql_path(path, "/graphiql") is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/users/brendan/graphiql", "/users/brendan"),
        ("users/graphiql", "/users"),
        ("/graphiql", "/"),
        ("/graphql", "/graphql"),
    ],
)
def test_graphql_endpoint(path, expected):
    assert graphql_endpoint(path, "/graphiql") == expected
