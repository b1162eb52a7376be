# -*- coding: utf-8 -*-
"""
Integration with `aiohttp <https://docs.aiohttp.org/>`_.

Routing, including 404 responses for unmatched paths, is left to the
``aiohttp`` router. Upstream middlewares can attach a result transform to a
request by setting ``request["graphql.transform"]``.

Usage::

    app = make_app(GraphQLOptions(schema, graphiql=True), "/graphql")
    web.run_app(app)
"""

import json
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, Union

from aiohttp import web

from .errors import normalize_error
from .exc import InvalidRequestError
from .handler import GraphQLHandler
from .options import GraphQLOptions
from .request import GraphQLBody, RequestContext
from .response import HTTPResponse


logger = logging.getLogger(__name__)

TRANSFORM_KEY = "graphql.transform"

AiohttpHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]

_FORM_CONTENT_TYPES = frozenset(
    ("application/x-www-form-urlencoded", "multipart/form-data")
)


async def _read_text(request: web.Request) -> str:
    try:
        return await request.text()
    except UnicodeDecodeError:
        raise InvalidRequestError("Body is not valid UTF-8.")


async def _read_body(request: web.Request) -> Optional[GraphQLBody]:
    content_type = request.content_type

    if content_type == "application/graphql":
        return GraphQLBody(await _read_text(request))

    if content_type in _FORM_CONTENT_TYPES:
        try:
            form = await request.post()
        except (ValueError, UnicodeDecodeError):
            raise InvalidRequestError("Body is invalid form data.")
        return GraphQLBody.from_mapping(form)

    text = await _read_text(request)
    if not text.strip():
        return None

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        raise InvalidRequestError("Body is invalid JSON.")

    return GraphQLBody.from_mapping(data)


async def request_context_from_aiohttp(
    request: web.Request,
) -> RequestContext:
    """
    Build a :class:`~py_gql_http.RequestContext` from an ``aiohttp`` request.

    GraphQL parameters are looked up in the query string for ``GET`` and
    ``HEAD`` requests and in the body otherwise (or when the query string
    does not contain any).

    Raises:
        InvalidRequestError: If the body or variables cannot be decoded.
    """
    body = None  # type: Optional[GraphQLBody]

    if request.method in ("GET", "HEAD"):
        body = GraphQLBody.from_mapping(request.query)

    if body is None and request.can_read_body:
        body = await _read_body(request)

    return RequestContext(
        request.method,
        request.path,
        request.headers,
        body=body,
        transform=request.get(TRANSFORM_KEY),
        raw=request,
    )


def to_aiohttp_response(response: HTTPResponse) -> web.Response:
    return web.Response(
        status=response.status,
        text=response.body,
        content_type=response.content_type,
        headers=response.headers or None,
    )


def graphql_handler(
    options: Union[GraphQLOptions, GraphQLHandler],
) -> AiohttpHandler:
    """
    Build an ``aiohttp`` request handler.

    Args:
        options: Handler configuration or an existing handler.

    Returns:
        Coroutine function to register with the application router.
    """
    handler = (
        options
        if isinstance(options, GraphQLHandler)
        else GraphQLHandler(options)
    )

    async def handle(request: web.Request) -> web.Response:
        try:
            ctx = await request_context_from_aiohttp(request)
        except Exception as err:
            response = normalize_error(
                err, hide_errors=handler.options.hide_errors
            )
        else:
            response = await handler.handle(ctx)
        return to_aiohttp_response(response)

    return handle


def graphql_paths(path: str, options: GraphQLOptions) -> Sequence[str]:
    """
    Paths to register for a handler mounted at ``path``.

    >>> graphql_paths("/users", GraphQLOptions(object(), graphiql=True))
    ['/users', '/users/graphiql']
    """
    path = "/" + path.strip("/")
    if not options.graphiql:
        return [path]
    return [path, path.rstrip("/") + options.endpoint_url]


def add_graphql_routes(
    app: web.Application, path: str, options: GraphQLOptions
) -> AiohttpHandler:
    """
    Mount a GraphQL handler at ``path`` (and the GraphiQL page under it if
    enabled) for all HTTP methods.

    Returns:
        The registered ``aiohttp`` handler.
    """
    handle = graphql_handler(options)
    for route_path in graphql_paths(path, options):
        logger.debug("Registering GraphQL handler at %s", route_path)
        app.router.add_route("*", route_path, handle)
    return handle


@web.middleware
async def not_found_middleware(
    request: web.Request, handler: AiohttpHandler
) -> web.StreamResponse:
    """ Plain text 404 responses for paths not matched by the router. """
    try:
        return await handler(request)
    except web.HTTPNotFound:
        return web.Response(
            status=404,
            text="Endpoint '%s' for method %s not found."
            % (request.path, request.method),
        )


def make_app(
    options: GraphQLOptions,
    path: str = "/graphql",
    middlewares: Sequence[Any] = (),
) -> web.Application:
    """
    Build an application serving GraphQL at ``path``.

    Args:
        options: Handler configuration
        path: Mount point of the handler
        middlewares: Additional middlewares, run after the 404 handling one.
    """
    app = web.Application(middlewares=[not_found_middleware, *middlewares])
    add_graphql_routes(app, path, options)
    return app
