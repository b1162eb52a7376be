# -*- coding: utf-8 -*-
"""
Framework independent view of an incoming HTTP request and content
negotiation helpers.
"""

import json
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from multidict import CIMultiDict, CIMultiDictProxy

from .exc import InvalidRequestError


Transform = Callable[[Any], Any]
Headers = Union[Mapping[str, str], CIMultiDict, CIMultiDictProxy]

JSON_CONTENT_TYPE = "application/json"
HTML_CONTENT_TYPE = "text/html"


class GraphQLBody:
    """
    GraphQL parameters extracted from a request.

    Args:
        query: Query document, usually a string. Empty values are allowed.
        variables: Raw, JSON decoded variables.
        operation_name: Operation to execute.
    """

    __slots__ = ("query", "variables", "operation_name")

    def __init__(
        self,
        query: Any,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
    ):
        self.query = query
        self.variables = variables
        self.operation_name = operation_name

    def __repr__(self) -> str:
        return "<GraphQLBody query=%r variables=%r operation_name=%r>" % (
            self.query,
            self.variables,
            self.operation_name,
        )

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["GraphQLBody"]:
        """
        Extract GraphQL parameters from decoded JSON or query string
        parameters.

        Returns:
            ``None`` when ``data`` does not contain a ``query`` entry.

        Raises:
            InvalidRequestError: If variables cannot be decoded.
        """
        if not isinstance(data, Mapping) or "query" not in data:
            return None

        return cls(
            data["query"],
            variables=parse_variables(data.get("variables")),
            operation_name=(
                data.get("operationName") or data.get("operation_name")
            ),
        )


def parse_variables(value: Any) -> Optional[Mapping[str, Any]]:
    """
    Normalize the ``variables`` parameter which can be sent as an object or
    as a JSON encoded string (e.g. in GET requests).

    >>> parse_variables('{"id": 1}')
    {'id': 1}

    >>> parse_variables(None) is None
    True
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise InvalidRequestError("Variables are invalid JSON.")

    if value is None:
        return None

    if not isinstance(value, Mapping):
        raise InvalidRequestError("Variables must be an object.")

    return value


def parse_accept_header(value: Optional[str]) -> List[Tuple[str, float]]:
    """
    Parse an ``Accept`` header into ``(media_range, quality)`` pairs sorted by
    decreasing quality. Ties keep the order of the header.

    >>> parse_accept_header("text/html,application/xml;q=0.9,*/*;q=0.8")
    [('text/html', 1.0), ('application/xml', 0.9), ('*/*', 0.8)]

    >>> parse_accept_header("")
    []
    """
    if not value:
        return []

    entries = []  # type: List[Tuple[int, str, float]]
    for index, part in enumerate(value.split(",")):
        media_range, *params = [p.strip() for p in part.split(";")]
        if not media_range:
            continue

        quality = 1.0
        for param in params:
            key, _, raw = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = max(0.0, min(1.0, float(raw.strip())))
                except ValueError:
                    quality = 0.0

        entries.append((index, media_range.lower(), quality))

    entries.sort(key=lambda e: (-e[2], e[0]))
    return [(media_range, quality) for _, media_range, quality in entries]


def _quality(
    accepted: List[Tuple[str, float]], content_type: str
) -> Tuple[float, int]:
    # Returns the quality of the most specific matching range and its rank in
    # the list of accepted ranges.
    major = content_type.split("/")[0]
    best = None  # type: Optional[Tuple[int, float, int]]
    for rank, (media_range, quality) in enumerate(accepted):
        if media_range == content_type:
            specificity = 2
        elif media_range == "%s/*" % major:
            specificity = 1
        elif media_range == "*/*" or media_range == "*":
            specificity = 0
        else:
            continue

        if best is None or specificity > best[0]:
            best = (specificity, quality, rank)

    if best is None:
        return 0.0, len(accepted)
    return best[1], best[2]


def prefers_html(accept: Optional[str]) -> bool:
    """
    Whether a client prefers ``text/html`` over ``application/json``.

    Wildcards are not considered a preference for HTML so that API clients
    sending ``*/*`` always get JSON.

    >>> prefers_html("text/html,application/xhtml+xml,*/*;q=0.8")
    True

    >>> prefers_html("application/json")
    False

    >>> prefers_html("*/*")
    False
    """
    accepted = parse_accept_header(accept)
    if not any(media_range == HTML_CONTENT_TYPE for media_range, _ in accepted):
        return False

    html_q, html_rank = _quality(accepted, HTML_CONTENT_TYPE)
    json_q, json_rank = _quality(accepted, JSON_CONTENT_TYPE)

    if html_q <= 0:
        return False
    if html_q != json_q:
        return html_q > json_q
    return html_rank < json_rank


class RequestContext:
    """
    Per request view consumed by :class:`~py_gql_http.GraphQLHandler`.

    Args:
        method: HTTP method
        path: Matched path
        headers: Request headers
        body: GraphQL parameters if any were found in the request.
        transform: Optional callable allowed to mutate the execution result in
            place before it is serialized.
        raw: Underlying framework request, if any.

    Attributes:
        method (str): Upper cased HTTP method
        path (str): Matched path
        headers (CIMultiDictProxy): Case insensitive request headers
        body (Optional[GraphQLBody]): GraphQL parameters
        transform (Optional[Callable]): Result transform hook
        raw (Any): Underlying framework request
    """

    __slots__ = ("method", "path", "headers", "body", "transform", "raw")

    def __init__(
        self,
        method: str,
        path: str,
        headers: Optional[Headers] = None,
        body: Optional[GraphQLBody] = None,
        transform: Optional[Transform] = None,
        raw: Any = None,
    ):
        self.method = method.upper()
        self.path = path
        self.headers = CIMultiDictProxy(CIMultiDict(headers or {}))
        self.body = body
        self.transform = transform
        self.raw = raw

    def __repr__(self) -> str:
        return "<RequestContext %s %s>" % (self.method, self.path)

    @property
    def accepted_content_types(self) -> List[str]:
        """ Accepted media ranges ordered by preference. """
        return [
            media_range
            for media_range, _ in parse_accept_header(
                self.headers.get("Accept")
            )
        ]

    @property
    def prefers_html(self) -> bool:
        return prefers_html(self.headers.get("Accept"))
