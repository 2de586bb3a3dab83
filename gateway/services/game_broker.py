"""Game use cases: forward move/reset requests to the engine and reshape the answer.

The broker holds no board between calls; each answer is built only from the
engine's response to that call.
"""

import logging

from fastapi import Depends

from gateway.context import GatewayContext, get_context
from gateway.converter import BoardConverter
from gateway.models.dc_models import (
    EngineStatusResponse,
    MoveRequest,
    MoveResponse,
    ResetResponse,
)
from gateway.services.game_engine import GameEngineClient


class GameBroker:
    def __init__(self, engine_client: GameEngineClient, converter: BoardConverter):
        self.engine_client = engine_client
        self.converter = converter

    async def move(self, request: MoveRequest) -> MoveResponse:
        payload = await self.engine_client.execute_move(request.cell_index)
        response = self.converter.convert_move_payload(payload)
        if response.winner is not None:
            logging.info(f"Game decided, winner: {response.winner}")
        return response

    async def reset(self) -> ResetResponse:
        payload = await self.engine_client.reset()
        logging.info("Game reset")
        return self.converter.convert_reset_payload(payload)

    async def engine_status(self) -> EngineStatusResponse:
        text = await self.engine_client.status()
        return EngineStatusResponse(
            message="Gateway is connected to the game engine", engine=text
        )


def get_game_broker(context: GatewayContext = Depends(get_context)) -> GameBroker:
    return GameBroker(context.engine_client, context.converter)
