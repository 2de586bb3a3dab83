"""HTTP client for the external game engine.

- The engine owns the board and the rules; this client only forwards calls.
- Every call is bounded by the client timeout.
- Transport failures, timeouts and unreadable JSON become EngineCommunicationError;
  non-success answers become EngineResponseError carrying the engine's raw text.
"""

import logging
from typing import Any

import httpx

from gateway.errors import EngineCommunicationError, EngineResponseError


class GameEngineClient:
    """Client for communicating with the game engine."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            logging.error(f"Game engine timeout: {method} {path}")
            raise EngineCommunicationError()
        except httpx.RequestError as e:
            logging.error(f"Game engine request error: {method} {path}: {e!r}")
            raise EngineCommunicationError()

        if not response.is_success:
            logging.error(
                f"Error from game engine ({response.status_code}) on {path}: {response.text}"
            )
            raise EngineResponseError(response.text, response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            logging.error(f"Game engine sent invalid JSON: {response.text!r}")
            raise EngineCommunicationError()

    async def execute_move(self, index: int) -> Any:
        """Apply a move on the engine's board

        Args:
            index (int): Global index of the cell chosen by the player

        Returns:
            Any: The engine payload, normally ``{"board": ..., "winner": ...}``
        """
        response = await self._request("POST", "/execute-move", json={"index": index})
        return self._json(response)

    async def reset(self) -> Any:
        """Start a new board on the engine

        Returns:
            Any: The engine payload holding the fresh board
        """
        response = await self._request("POST", "/reset")
        return self._json(response)

    async def status(self) -> str:
        response = await self._request("GET", "/status")
        return response.text
