import logging
from typing import Any, Optional

from pydantic import ValidationError

from gateway.domain.board_rules import looks_like_board, validate_layout
from gateway.errors import BoardTranslationError
from gateway.models.dc_models import BoardModel, MoveResponse, ResetResponse


class BoardConverter:
    """This class is used to convert game engine payloads to the client contract."""

    def __init__(self, board_key: str = "board", topology: str = "triangular"):
        self.board_key = board_key
        self.topology = topology

    def find_board(self, payload: Any) -> dict:
        """Locate the board inside an engine payload

        The board may be the payload itself (reset), nested under the configured
        key (execute-move), or nested under a single other key chosen by the engine.

        Args:
            payload (Any): Decoded JSON body of the engine response

        Raises:
            BoardTranslationError: No board could be found

        Returns:
            dict: The raw board object
        """
        if looks_like_board(payload):
            return payload
        if isinstance(payload, dict):
            nested = payload.get(self.board_key)
            if looks_like_board(nested):
                return nested
            candidates = [value for value in payload.values() if looks_like_board(value)]
            if len(candidates) == 1:
                return candidates[0]
        logging.error(f"No board found in engine payload: {payload!r}")
        raise BoardTranslationError()

    def convert_board(self, raw_board: dict) -> BoardModel:
        """Validate a raw engine board and convert it to BoardModel

        Args:
            raw_board (dict): Board object in YEN notation

        Raises:
            BoardTranslationError: Missing fields or a layout that breaks the size invariant

        Returns:
            BoardModel: The board to send to the client
        """
        try:
            board = BoardModel.model_validate(raw_board)
            validate_layout(board.layout, board.size, board.players, self.topology)
        except (ValidationError, ValueError) as e:
            logging.error(f"Malformed board from game engine: {e}")
            raise BoardTranslationError() from e
        return board

    @staticmethod
    def convert_winner(payload: Any) -> Optional[int]:
        winner = payload.get("winner") if isinstance(payload, dict) else None
        if winner is None:
            return None
        if isinstance(winner, bool) or not isinstance(winner, int):
            logging.error(f"Malformed winner from game engine: {winner!r}")
            raise BoardTranslationError()
        return winner

    def convert_move_payload(self, payload: Any) -> MoveResponse:
        board = self.convert_board(self.find_board(payload))
        return MoveResponse(board=board, winner=self.convert_winner(payload))

    def convert_reset_payload(self, payload: Any) -> ResetResponse:
        return ResetResponse(board=self.convert_board(self.find_board(payload)))
