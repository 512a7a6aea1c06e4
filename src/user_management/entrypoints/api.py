from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from user_management.adapters.repository import UserRepository
from user_management.entrypoints.middleware import Pipeline, default_pipeline
from user_management.entrypoints.routers import users
from user_management.services.config import Settings, settings as default_settings
from user_management.services.user_service import UserService


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


class API(FastAPI):
    def __init__(self, pipeline: Pipeline, debug: bool = False) -> None:
        super().__init__(title="User Management API", debug=debug)

        self.add_middleware(BaseHTTPMiddleware, dispatch=pipeline)
        self.add_exception_handler(StarletteHTTPException, not_found_handler)

        @self.get("/health")
        async def health() -> dict[str, str]:
            return {"status": "ok"}


def create_app(
    repository: Optional[UserRepository] = None,
    settings: Optional[Settings] = None,
    pipeline: Optional[Pipeline] = None,
) -> API:
    settings = settings or default_settings
    repository = repository if repository is not None else UserRepository()

    app = API(pipeline or default_pipeline(settings), debug=bool(settings.DEBUG))
    app.state.user_service = UserService(
        repository,
        default_page=settings.USER_MANAGEMENT_DEFAULT_PAGE,
        default_page_size=settings.USER_MANAGEMENT_DEFAULT_PAGE_SIZE,
    )
    app.include_router(users.router, prefix=settings.USER_MANAGEMENT_URL_PREFIX, tags=["users"])
    return app


app = create_app()
