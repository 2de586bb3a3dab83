from fastapi import APIRouter, Depends

from gateway.context import request_body
from gateway.models.dc_models import (
    EngineStatusResponse,
    ErrorResponse,
    MoveRequest,
    MoveResponse,
    ResetRequest,
    ResetResponse,
)
from gateway.services.game_broker import GameBroker, get_game_broker

game_router = APIRouter()


class GameAPI:
    @staticmethod
    @game_router.post(
        "/move",
        response_model=MoveResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def move(
        request: MoveRequest = Depends(request_body(MoveRequest)),
        broker: GameBroker = Depends(get_game_broker),
    ):
        return await broker.move(request)

    @staticmethod
    @game_router.post(
        "/reset",
        response_model=ResetResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def reset(
        request: ResetRequest = Depends(request_body(ResetRequest)),
        broker: GameBroker = Depends(get_game_broker),
    ):
        return await broker.reset()

    @staticmethod
    @game_router.get(
        "/engine/status",
        response_model=EngineStatusResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def engine_status(broker: GameBroker = Depends(get_game_broker)):
        return await broker.engine_status()


class HealthAPI:
    @staticmethod
    @game_router.get("/health")
    async def health():
        return {"status": "ok"}
