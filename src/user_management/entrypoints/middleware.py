"""Request pipeline shared by every route.

Each middleware is an ``async (request, call_next) -> Response`` callable.
``Pipeline`` holds an ordered list of them (outermost first) and is installed
once into the application as a single Starlette dispatch function, so the
ordering lives in one place instead of in the reverse order of
``add_middleware`` calls.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Awaitable, Callable, List, Sequence

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

from user_management.services.config import Settings

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Middleware = Callable[[Request, CallNext], Awaitable[Response]]

BEARER_PREFIX = "Bearer "


async def error_handling(request: Request, call_next: CallNext) -> Response:
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled exception occurred.")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error."},
        )


def token_authentication(accepted_token: str) -> Middleware:
    async def authenticate(request: Request, call_next: CallNext) -> Response:
        token = request.headers.get("Authorization", "").removeprefix(BEARER_PREFIX)
        if not token or token != accepted_token:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "Unauthorized"},
            )
        return await call_next(request)

    return authenticate


async def request_logging(request: Request, call_next: CallNext) -> Response:
    method = request.method
    path = request.url.path
    logger.info("Incoming Request: %s %s", method, path)
    response = await call_next(request)
    logger.info("Outgoing Response: %s for %s %s", response.status_code, method, path)
    return response


def compose(middlewares: Sequence[Middleware], endpoint: CallNext) -> CallNext:
    handler = endpoint
    for middleware in reversed(middlewares):
        handler = partial(middleware, call_next=handler)
    return handler


class Pipeline:
    def __init__(self, middlewares: Sequence[Middleware]) -> None:
        self.middlewares: List[Middleware] = list(middlewares)

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        return await compose(self.middlewares, call_next)(request)


def default_pipeline(settings: Settings) -> Pipeline:
    return Pipeline(
        [
            error_handling,
            token_authentication(settings.USER_MANAGEMENT_API_TOKEN),
            request_logging,
        ]
    )
