"""
Error mapping for the ``/users`` endpoints.

``UserErrorRoute`` is installed as the route class of the users
router.  It wraps every matched handler (dependencies and body parsing
included) and turns exceptions into plain-text responses:

* ``NOT_FOUND`` errors become ``404 User not found``;
* ``FORM`` errors become ``400`` with the error message as body;
* undecodable or non-object JSON bodies become ``400 Invalid request body``;
* everything else becomes ``500 Internal server error``.

Requests that match no route never reach this code; they are answered
by the catch-all registered in ``main``.
"""

import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import ErrorKind, UserStoreError

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
INVALID_BODY = "Invalid request body"
INTERNAL_ERROR = "Internal server error"


def error_response(exc: UserStoreError) -> PlainTextResponse:
    """Build the response for a store error from its kind."""
    if exc.kind is ErrorKind.NOT_FOUND:
        return PlainTextResponse(USER_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    if exc.kind is ErrorKind.FORM:
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UserErrorRoute(APIRoute):
    """APIRoute that maps exceptions raised while handling a request."""

    def get_route_handler(self) -> Callable:
        original_handler = super().get_route_handler()

        async def handler(request: Request) -> Response:
            try:
                return await original_handler(request)
            except StarletteHTTPException:
                raise
            except RequestValidationError as exc:
                logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
                return PlainTextResponse(INVALID_BODY, status_code=status.HTTP_400_BAD_REQUEST)
            except UserStoreError as exc:
                if exc.kind is ErrorKind.INTERNAL:
                    logger.exception("Store contract violated on %s %s", request.method, request.url.path)
                else:
                    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
                return error_response(exc)
            except Exception:
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                return PlainTextResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return handler
