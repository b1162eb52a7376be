# -*- coding: utf-8 -*-
"""
Framework independent GraphQL request handler.
"""

import inspect
import logging
import re
from typing import Any, Callable, Dict, Mapping

from py_gql import graphql

from .errors import normalize_error
from .exc import HookError, InvalidRequestError, MissingQueryError
from .graphiql import render_graphiql
from .options import GraphQLOptions
from .request import RequestContext
from .response import HTTPResponse, dump_json
from .routing import Route, classify


logger = logging.getLogger(__name__)

TRANSFORM_LOCATION = "Function 'request.graphql.transform'"
ON_RESPONSE_LOCATION = "Function 'optionsData.onResponse'"

_COMMENT_RE = re.compile(r"#[^\n\r]*")

_EMPTY_QUERY_RE = re.compile(
    r"^\s*(?:(?:query|mutation|subscription)"
    r"(?:\s+[_A-Za-z][_0-9A-Za-z]*)?\s*)?\{[\s,]*\}\s*$"
)


def is_empty_query(query: Any) -> bool:
    """
    Whether a query selects nothing, in which case there is nothing to
    execute.

    >>> is_empty_query("query{}"), is_empty_query("{}"), is_empty_query("")
    (True, True, True)

    >>> is_empty_query("# nothing\\n{}")
    True

    >>> is_empty_query("{ products { name } }"), is_empty_query([])
    (False, False)
    """
    if isinstance(query, str):
        query = _COMMENT_RE.sub("", query)
        return not query.strip() or bool(_EMPTY_QUERY_RE.match(query))
    return isinstance(query, Mapping) and not query


async def _call_hook(
    location: str, hook: Callable[..., Any], *args: Any
) -> Any:
    try:
        value = hook(*args)
        if inspect.isawaitable(value):
            value = await value
    except Exception as err:
        raise HookError(location, err) from err
    return value


class GraphQLHandler:
    """
    Handle GraphQL requests against a schema.

    Requests are either answered with the GraphiQL page or executed and go
    through the response pipeline: execution, ``request.transform`` and
    ``options.on_response``. Any exception raised along the way is converted
    into a GraphQL shaped error response so that exactly one response is
    produced per request.

    The handler holds no per request state and can be shared across
    concurrent requests.

    Args:
        options: Handler configuration
    """

    def __init__(self, options: GraphQLOptions):
        self.options = options

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.options)

    async def handle(self, request: RequestContext) -> HTTPResponse:
        route = classify(request, self.options)
        logger.debug("[%r] Classified as %s", request, route.name)

        if route is Route.GRAPHIQL:
            return HTTPResponse.html(
                render_graphiql(request.path, self.options.endpoint_url)
            )

        try:
            if route is Route.MISSING_QUERY:
                raise MissingQueryError()
            return await self._process(request)
        except Exception as err:
            return normalize_error(err, hide_errors=self.options.hide_errors)

    async def execute(self, request: RequestContext) -> Dict[str, Any]:
        """
        Execute the query attached to the request.

        Returns:
            JSON serializable GraphQL response.

        Raises:
            MissingQueryError: If the request holds no query.
            InvalidRequestError: If the query is not a string.
        """
        body = request.body
        if body is None or body.query is None:
            raise MissingQueryError()

        if is_empty_query(body.query):
            return {}

        if not isinstance(body.query, str):
            raise InvalidRequestError("Query must be a string.")

        options = self.options
        context = (
            options.context(request) if options.context is not None else request
        )

        result = await graphql(
            options.schema,
            body.query,
            variables=body.variables,
            operation_name=body.operation_name,
            root=options.root,
            context=context,
            middlewares=list(options.middlewares) or None,
        )
        return result.response()

    async def _process(self, request: RequestContext) -> HTTPResponse:
        response = HTTPResponse()
        result = await self.execute(request)

        if request.transform is not None:
            await _call_hook(TRANSFORM_LOCATION, request.transform, result)

        if self.options.on_response is not None:
            replacement = await _call_hook(
                ON_RESPONSE_LOCATION,
                self.options.on_response,
                request,
                response,
                result,
            )
            if replacement is not None:
                result = replacement

        response.body = dump_json(result)
        return response
