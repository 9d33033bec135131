"""Registry Route Class — plain-text error boundary for the course registry router.

Invariants:
    - RegistryError → its message as text/plain with its HTTP status
    - Any other unexpected exception → 500 "An Error has occurred", logged with traceback
    - HTTPException and RequestValidationError pass through to the app-level handlers
"""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus_api.core.errors import RegistryError
from campus_api.core.format_registry import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class RegistryRoute(APIRoute):
    """APIRoute that renders registry failures the way registry clients expect."""

    def get_route_handler(self) -> Callable:
        original_handler = super().get_route_handler()

        async def registry_route_handler(request: Request) -> Response:
            try:
                return await original_handler(request)
            except RegistryError as exc:
                logger.info(
                    f"Registry lookup failed: {exc.message}",
                    extra={"error_code": exc.code, "path": request.url.path},
                )
                return PlainTextResponse(exc.message, status_code=exc.http_status)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception as exc:
                logger.error(
                    f"Unhandled exception on {request.url.path}: {exc}",
                    exc_info=True,
                )
                return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

        return registry_route_handler
