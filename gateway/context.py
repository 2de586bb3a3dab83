"""Explicit per-process context handed to the handler layer.

The gateway keeps no server-side session state: the context only holds
read-only collaborators built once at startup (settings, credential store
session factory, game engine client). Nothing in it changes per request, and
no board or user session is cached between requests.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import Body, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gateway.authentication.password_hasher import PasswordHasher
from gateway.converter import BoardConverter
from gateway.errors import RequestValidationFailed
from gateway.load_secrets import GatewaySettings
from gateway.models.dc_models import CUSTOM_ERROR_TYPES
from gateway.services.game_engine import GameEngineClient

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class GatewayContext:
    settings: GatewaySettings
    session_factory: async_sessionmaker[AsyncSession]
    engine_client: GameEngineClient
    hasher: PasswordHasher
    converter: BoardConverter


def get_context(request: Request) -> GatewayContext:
    return request.app.state.context


def request_body(model: type[ModelT]) -> Callable[..., Awaitable[ModelT]]:
    """Build a dependency that validates the JSON body against ``model``.

    A missing or ``null`` body is validated as ``{}``, so each schema reports
    its own message for absent fields.
    """

    async def _parse(body: Any = Body(None)) -> ModelT:
        try:
            return model.model_validate({} if body is None else body)
        except ValidationError as e:
            for error in e.errors():
                if error.get("type") in CUSTOM_ERROR_TYPES:
                    raise RequestValidationFailed(error["msg"]) from e
            raise RequestValidationFailed() from e

    return _parse
