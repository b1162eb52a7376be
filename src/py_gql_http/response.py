# -*- coding: utf-8 -*-

import json
from typing import Any, Dict, Optional

from .request import HTML_CONTENT_TYPE, JSON_CONTENT_TYPE


def dump_json(value: Any) -> str:
    """ Compact JSON serialization preserving key order.

    >>> dump_json({"data": {"products": [{"id": "1"}]}})
    '{"data":{"products":[{"id":"1"}]}}'
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class HTTPResponse:
    """
    Response produced by :class:`~py_gql_http.GraphQLHandler`.

    Framework bindings are responsible for writing it out. Hooks receive the
    pending response and can add headers to it.

    Attributes:
        status (int): HTTP status code
        body (str): Response body
        content_type (str): Response content type
        headers (Dict[str, str]): Additional headers
    """

    __slots__ = ("status", "body", "content_type", "headers")

    def __init__(
        self,
        status: int = 200,
        body: str = "",
        content_type: str = JSON_CONTENT_TYPE,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status = status
        self.body = body
        self.content_type = content_type
        self.headers = dict(headers or {})

    def __repr__(self) -> str:
        return "<HTTPResponse %d %s>" % (self.status, self.content_type)

    @classmethod
    def json(cls, payload: Any, status: int = 200, **kwargs: Any):
        return cls(status, dump_json(payload), JSON_CONTENT_TYPE, **kwargs)

    @classmethod
    def html(cls, text: str, status: int = 200, **kwargs: Any):
        return cls(status, text, HTML_CONTENT_TYPE, **kwargs)
