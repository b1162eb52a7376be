# -*- coding: utf-8 -*-
"""
Conversion of exceptions raised while handling a request into GraphQL
shaped error responses.
"""

import enum
import logging
from typing import Any, Dict, Tuple

from .exc import HookError, HTTPGraphQLError
from .response import HTTPResponse


logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal Server Error"


class ErrorKind(enum.Enum):
    # Raised on purpose with an explicit status code.
    DOMAIN = enum.auto()
    # Raised by a user provided hook.
    HOOK = enum.auto()
    UNKNOWN = enum.auto()

    @classmethod
    def of(cls, err: BaseException) -> "ErrorKind":
        if isinstance(err, HTTPGraphQLError):
            return cls.DOMAIN
        if isinstance(err, HookError):
            return cls.HOOK
        return cls.UNKNOWN


def format_error(
    err: Exception, *, hide_errors: bool = False
) -> Tuple[int, Dict[str, Any]]:
    """
    Build the status code and JSON payload describing an error.

    Args:
        err: Exception raised while handling the request
        hide_errors: Replace the message with a generic one regardless of the
            error's own ``hide`` flag.

    Returns:
        ``(status, payload)`` where payload is ``{"errors": [entry]}``.
    """
    kind = ErrorKind.of(err)

    if kind is ErrorKind.DOMAIN:
        assert isinstance(err, HTTPGraphQLError)
        status = err.code
        entry = err.to_dict()
        hide = hide_errors or err.hide
        logger.debug("GraphQL error (%d): %s", status, err.message)
    elif kind is ErrorKind.HOOK:
        assert isinstance(err, HookError)
        status = 500
        entry = err.to_dict()
        hide = hide_errors or getattr(err.original_error, "hide", False)
        logger.error(
            "Error in %s", err.location, exc_info=err.original_error
        )
    else:
        status = 500
        entry = {"message": str(err)}
        hide = hide_errors
        logger.error("Unhandled error in GraphQL handler", exc_info=err)

    if hide:
        entry["message"] = GENERIC_ERROR_MESSAGE

    return status, {"errors": [entry]}


def normalize_error(
    err: Exception, *, hide_errors: bool = False
) -> HTTPResponse:
    status, payload = format_error(err, hide_errors=hide_errors)
    return HTTPResponse.json(payload, status=status)
