# -*- coding: utf-8 -*-

import html
import json
import os

from .routing import graphql_endpoint


GRAPHIQL_VERSION = "1.4.7"

with open(os.path.join(os.path.dirname(__file__), "graphiql.html")) as f:
    GRAPHIQL_TEMPLATE = f.read()


def render_graphiql(path: str, endpoint_url: str) -> str:
    """
    Render the GraphiQL page served at ``path``, pointing it at the GraphQL
    endpoint it is mounted under.
    """
    endpoint = graphql_endpoint(path, endpoint_url)
    return (
        GRAPHIQL_TEMPLATE.replace("{{ version }}", GRAPHIQL_VERSION)
        .replace("{{ title }}", html.escape(endpoint))
        # Safe to embed in a <script> tag.
        .replace(
            "{{ endpoint }}", json.dumps(endpoint).replace("</", "<\\/")
        )
    )
