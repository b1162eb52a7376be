# -*- coding: utf-8 -*-
"""
py_gql_http

HTTP request handling for `py_gql <https://github.com/lirsacc/py-gql>`_
schemas: GraphQL execution over HTTP with configurable error status codes and
an optional GraphiQL page for browsers.

The core :class:`GraphQLHandler` is framework independent, see
:mod:`py_gql_http.aiohttp` for the ``aiohttp`` integration.
"""

from .version import __version__  # isort:skip

from .errors import ErrorKind, format_error, normalize_error
from .exc import (
    HookError,
    HTTPGraphQLError,
    InvalidRequestError,
    MissingQueryError,
    graphql_error,
)
from .handler import GraphQLHandler
from .options import GraphQLOptions
from .request import GraphQLBody, RequestContext
from .response import HTTPResponse
from .routing import Route, classify


__all__ = (
    "__version__",
    "GraphQLHandler",
    "GraphQLOptions",
    "RequestContext",
    "GraphQLBody",
    "HTTPResponse",
    "Route",
    "classify",
    "ErrorKind",
    "format_error",
    "normalize_error",
    "HTTPGraphQLError",
    "HookError",
    "InvalidRequestError",
    "MissingQueryError",
    "graphql_error",
)
