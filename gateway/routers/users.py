from fastapi import APIRouter, Depends

from gateway.authentication.user_authentication import (
    UserAuthentication,
    get_user_authentication,
)
from gateway.context import request_body
from gateway.models.dc_models import (
    CreateUserRequest,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)

user_router = APIRouter()


class UserAPI:
    @staticmethod
    @user_router.post(
        "/createuser",
        response_model=MessageResponse,
        responses={400: {"model": ErrorResponse}},
    )
    async def create_user(
        request: CreateUserRequest = Depends(request_body(CreateUserRequest)),
        user_auth: UserAuthentication = Depends(get_user_authentication),
    ):
        return await user_auth.register(request)

    @staticmethod
    @user_router.post(
        "/login",
        response_model=LoginResponse,
        response_model_exclude_none=True,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def login(
        request: LoginRequest = Depends(request_body(LoginRequest)),
        user_auth: UserAuthentication = Depends(get_user_authentication),
    ):
        return await user_auth.login(request)
