# -*- coding: utf-8 -*-
"""
Request classification.
"""

import enum

from .options import GraphQLOptions
from .request import RequestContext


class Route(enum.Enum):
    GRAPHIQL = enum.auto()
    EXECUTE = enum.auto()
    MISSING_QUERY = enum.auto()


_SAFE_METHODS = frozenset(("GET", "HEAD"))


def _normalize_path(path: str) -> str:
    return "/" + path.strip("/") if path.strip("/") else "/"


def is_graphiql_path(path: str, endpoint_url: str) -> bool:
    """
    >>> is_graphiql_path("/users/brendan/graphiql", "/graphiql")
    True

    >>> is_graphiql_path("users/graphiql/", "/graphiql")
    True

    >>> is_graphiql_path("/users/notgraphiql", "/graphiql")
    False
    """
    return _normalize_path(path).endswith(endpoint_url)


def graphql_endpoint(path: str, endpoint_url: str) -> str:
    """ Live GraphQL endpoint for a GraphiQL page served at ``path``.

    >>> graphql_endpoint("/users/brendan/graphiql", "/graphiql")
    '/users/brendan'

    >>> graphql_endpoint("/graphiql", "/graphiql")
    '/'
    """
    path = _normalize_path(path)
    if path.endswith(endpoint_url):
        path = path[: -len(endpoint_url)]
    return path or "/"


def classify(request: RequestContext, options: GraphQLOptions) -> Route:
    """
    Decide how to handle a request.

    GraphiQL is only served to browser navigations (``GET`` requests
    preferring HTML over JSON) on the configured endpoint, everything else
    carrying a query is executed.
    """
    if (
        options.graphiql
        and request.method in _SAFE_METHODS
        and request.prefers_html
        and is_graphiql_path(request.path, options.endpoint_url)
    ):
        return Route.GRAPHIQL

    if request.body is not None:
        return Route.EXECUTE

    return Route.MISSING_QUERY
