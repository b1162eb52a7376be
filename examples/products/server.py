# -*- coding: utf-8 -*-
"""
Serve the products schema at ``/users/{username}`` with GraphiQL available
at ``/users/{username}/graphiql``.

Run with ``python -m aiohttp.web -P 8080 server:init`` from this directory
and set ``GRAPHQL_ENV=production`` to hide error messages.
"""

import logging

from aiohttp import web

from py_gql_http import GraphQLOptions
from py_gql_http.aiohttp import TRANSFORM_KEY, make_app
from schema import SCHEMA


logger = logging.getLogger(__name__)


def shout_names(result):
    for product in (result.get("data") or {}).get("products") or []:
        if "name" in product:
            product["name"] = product["name"].upper()


@web.middleware
async def shout(request, handler):
    # ?shout=1 uppercases product names in the response.
    if request.query.get("shout"):
        request[TRANSFORM_KEY] = shout_names
    return await handler(request)


def log_response(request, response, result):
    logger.info(
        "%s %s -> %d error(s)",
        request.method,
        request.path,
        len(result.get("errors", [])),
    )


def init(argv=None):
    logging.basicConfig(level=logging.INFO)
    options = GraphQLOptions.from_env(
        SCHEMA, graphiql=True, on_response=log_response
    )
    return make_app(options, "/users/{username}", middlewares=[shout])
