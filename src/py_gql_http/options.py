# -*- coding: utf-8 -*-
"""
Handler level configuration.
"""

import os
from typing import Any, Callable, Mapping, Optional, Sequence

from py_gql.schema import Schema


# (request, response, result) -> Optional[result]
OnResponse = Callable[[Any, Any, Any], Any]
ContextFactory = Callable[[Any], Any]

DEFAULT_ENDPOINT_URL = "/graphiql"

_TRUTHY = frozenset(("1", "true", "yes", "on"))
_FALSY = frozenset(("", "0", "false", "no", "off"))


def _env_flag(environ: Mapping[str, str], key: str) -> Optional[bool]:
    value = environ.get(key)
    if value is None:
        return None

    value = value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(
        'Invalid boolean value "%s" for environment variable %s'
        % (environ[key], key)
    )


class GraphQLOptions:
    """
    Configuration of a :class:`~py_gql_http.GraphQLHandler`.

    Args:
        schema: Executable schema, resolvers must already be attached.

        graphiql: Serve the GraphiQL exploration page to browsers.

        endpoint_url: Path suffix under which GraphiQL is served, relative to
            the mount point of the handler.

        on_response: Called as ``on_response(request, response, result)``
            once the query has been executed. A return value other than
            ``None`` replaces the result.

        hide_errors: Replace all error messages exposed to clients with a
            generic one. Use this in production.

        context: Called with the :class:`~py_gql_http.RequestContext` to build
            the context value passed to resolvers. Defaults to the request
            context itself.

        root: Root resolution value passed to the top-level resolver.

        middlewares: List of ``py_gql`` middleware functions.
    """

    __slots__ = (
        "schema",
        "graphiql",
        "endpoint_url",
        "on_response",
        "hide_errors",
        "context",
        "root",
        "middlewares",
    )

    def __init__(
        self,
        schema: Schema,
        *,
        graphiql: bool = False,
        endpoint_url: str = DEFAULT_ENDPOINT_URL,
        on_response: Optional[OnResponse] = None,
        hide_errors: bool = False,
        context: Optional[ContextFactory] = None,
        root: Any = None,
        middlewares: Sequence[Callable[..., Any]] = ()
    ):
        if schema is None:
            raise ValueError("A schema is required.")

        if not endpoint_url or not endpoint_url.startswith("/"):
            raise ValueError(
                'Expected endpoint_url to start with "/" but got %r'
                % endpoint_url
            )

        if on_response is not None and not callable(on_response):
            raise TypeError("on_response must be callable.")

        if context is not None and not callable(context):
            raise TypeError("context must be callable.")

        self.schema = schema
        self.graphiql = bool(graphiql)
        self.endpoint_url = endpoint_url.rstrip("/") or DEFAULT_ENDPOINT_URL
        self.on_response = on_response
        self.hide_errors = bool(hide_errors)
        self.context = context
        self.root = root
        self.middlewares = tuple(middlewares)

    def __repr__(self) -> str:
        return "<%s graphiql=%r endpoint_url=%r hide_errors=%r>" % (
            self.__class__.__name__,
            self.graphiql,
            self.endpoint_url,
            self.hide_errors,
        )

    @classmethod
    def from_env(
        cls,
        schema: Schema,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any
    ) -> "GraphQLOptions":
        """
        Build options from environment variables.

        Recognized variables are ``GRAPHQL_GRAPHIQL``, ``GRAPHQL_ENDPOINT_URL``
        and ``GRAPHQL_HIDE_ERRORS``. ``GRAPHQL_ENV=production`` hides errors
        unless ``GRAPHQL_HIDE_ERRORS`` says otherwise. Keyword arguments take
        precedence over the environment.

        Raises:
            ValueError: If a boolean variable cannot be interpreted.
        """
        env = os.environ if environ is None else environ
        kwargs = {}  # type: dict

        graphiql = _env_flag(env, "GRAPHQL_GRAPHIQL")
        if graphiql is not None:
            kwargs["graphiql"] = graphiql

        endpoint_url = env.get("GRAPHQL_ENDPOINT_URL")
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        hide_errors = _env_flag(env, "GRAPHQL_HIDE_ERRORS")
        if hide_errors is None:
            hide_errors = (
                env.get("GRAPHQL_ENV", "").strip().lower() == "production"
            )
        kwargs["hide_errors"] = hide_errors

        kwargs.update(overrides)
        return cls(schema, **kwargs)
