from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, Response

from user_management.domain.user import User
from user_management.entrypoints.schemas.user import UserRequest, UserResponse
from user_management.services.user_service import NotFound, Success, UserResult, UserService, ValidationFailed

router = APIRouter(prefix="/users")


def get_service(request: Request) -> UserService:
    return request.app.state.user_service


def _serialize(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email, details=user.details)


def _to_response(result: UserResult, request: Request) -> Response:
    if isinstance(result, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(result, ValidationFailed):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.message)
    if isinstance(result, Success):
        if result.value is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        body = _serialize(result.value).model_dump()
        if result.created:
            location = f"{request.url.path.rstrip('/')}/{result.value.id}"
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content=body,
                headers={"Location": location},
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content=body)
    raise TypeError(f"Unsupported result: {result!r}")


@router.get("", response_model=List[UserResponse])
async def list_users(
    page: Optional[int] = Query(default=None),
    page_size: Optional[int] = Query(default=None, alias="pageSize"),
    service: UserService = Depends(get_service),
) -> List[UserResponse]:
    return [_serialize(user) for user in service.list_users(page, page_size)]


@router.get("/{user_id:int}", response_model=UserResponse)
async def get_user(
    user_id: int,
    request: Request,
    service: UserService = Depends(get_service),
) -> Response:
    return _to_response(service.get_user(user_id), request)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserRequest,
    request: Request,
    service: UserService = Depends(get_service),
) -> Response:
    result = service.create_user(payload.name, payload.email, payload.details)
    return _to_response(result, request)


@router.put("/{user_id:int}", response_model=UserResponse)
async def update_user(
    user_id: int,
    payload: UserRequest,
    request: Request,
    service: UserService = Depends(get_service),
) -> Response:
    result = service.update_user(user_id, payload.name, payload.email, payload.details)
    return _to_response(result, request)


@router.delete("/{user_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    request: Request,
    service: UserService = Depends(get_service),
) -> Response:
    return _to_response(service.delete_user(user_id), request)
