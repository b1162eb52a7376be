# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Any, Dict


class HTTPGraphQLError(Exception):
    """
    GraphQL error carrying HTTP semantics.

    Raise this from resolvers (or any code running under the handler) to
    control the status code of the response. Prefer :func:`graphql_error` to
    build instances.

    Args:
        code: HTTP status code used for the response
        message: Explanatory message
        hide: Replace the message with a generic one before exposing it to
            clients.

    Attributes:
        code (int): HTTP status code used for the response
        message (str): Explanatory message
        hide (bool): Whether the message must be hidden from clients
    """

    def __init__(self, code: int = 500, message: str = "", hide: bool = False):
        super().__init__(message)
        self.code = code
        self.message = message
        self.hide = hide

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return "%s(%d, %r, hide=%r)" % (
            self.__class__.__name__,
            self.code,
            self.message,
            self.hide,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionnary that can be serialized to
        JSON and exposed in a GraphQL response.
        """
        return {"message": self.message}


class InvalidRequestError(HTTPGraphQLError):
    """ The request could not be turned into a GraphQL query. """

    def __init__(self, message: str):
        super().__init__(400, message)


class MissingQueryError(InvalidRequestError):
    def __init__(self, message: str = "Missing query."):
        super().__init__(message)


class HookError(Exception):
    """
    Wraps an exception raised by a user provided hook.

    Args:
        location: Name of the hook which failed, this is exposed to clients.
        original_error: The exception raised by the hook

    Attributes:
        location (str): Name of the hook which failed
        original_error (Exception): The exception raised by the hook
    """

    def __init__(self, location: str, original_error: Exception):
        self.location = location
        self.original_error = original_error
        self.message = "%s: %s" % (
            type(original_error).__name__,
            original_error,
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "location": self.location}


def graphql_error(
    code: int, message: str, *, hide: bool = False
) -> HTTPGraphQLError:
    """
    Build an error controlling the HTTP status code of the response.

    >>> err = graphql_error(404, "Product with id 10 does not exist.")
    >>> err.code, str(err)
    (404, 'Product with id 10 does not exist.')

    Args:
        code: HTTP status code
        message: Explanatory message
        hide: Hide the message from clients

    Returns:
        The error, ready to be raised.
    """
    return HTTPGraphQLError(code, message, hide=hide)
