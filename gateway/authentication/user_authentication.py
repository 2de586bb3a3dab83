import logging

from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from gateway.context import GatewayContext, get_context
from gateway.errors import (
    AuthenticationFailed,
    InvalidPasswordError,
    UserConflictError,
    UserNotFoundError,
)
from gateway.models.dc_models import (
    CreateUserRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from gateway.services import user_db


class UserAuthentication:
    """Registration and login against the credential store."""

    def __init__(self, context: GatewayContext):
        self.context = context
        self.settings = context.settings
        self.hasher = context.hasher

    async def register(self, request: CreateUserRequest) -> MessageResponse:
        """Hash the password and store a new user

        Args:
            request (CreateUserRequest): Validated registration data

        Raises:
            UserConflictError: Hashing or storing failed, for any reason

        Returns:
            MessageResponse: Welcome message
        """
        try:
            hash_password = await run_in_threadpool(self.hasher.hash, request.password)
            await user_db.create_user(
                self.context.session_factory,
                request.username,
                hash_password,
                request.age,
                request.country,
                timeout=self.settings.store_timeout,
            )
        except Exception as e:
            # Duplicate usernames and store failures are reported alike.
            logging.warning(f"Registration failed for {request.username}: {e!r}")
            raise UserConflictError() from e

        logging.info(f"User created: {request.username}")
        return MessageResponse(
            message=f"Hello {request.username}! Your account has been created!"
        )

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Check a username and password against the stored hash

        Args:
            request (LoginRequest): Validated credentials

        Raises:
            UserNotFoundError: No user with this username
            InvalidPasswordError: The password does not match
            CredentialStoreError: The store failed or timed out

        Returns:
            LoginResponse: Welcome message, stored username and score if any
        """
        user_data = await user_db.read_user(
            self.context.session_factory,
            request.username,
            timeout=self.settings.store_timeout,
        )
        if user_data is None:
            raise self._authentication_error(UserNotFoundError)

        matches = await run_in_threadpool(
            self.hasher.verify, request.password, user_data.hash_password
        )
        if not matches:
            logging.info(f"Wrong password for {user_data.username}")
            raise self._authentication_error(InvalidPasswordError)

        return LoginResponse(
            message=f"Welcome back, {user_data.username}!",
            username=user_data.username,
            score=user_data.score,
        )

    def _authentication_error(self, error_class: type[AuthenticationFailed]) -> AuthenticationFailed:
        if self.settings.login_generic_errors:
            return AuthenticationFailed()
        return error_class()


def get_user_authentication(
    context: GatewayContext = Depends(get_context),
) -> UserAuthentication:
    return UserAuthentication(context)
