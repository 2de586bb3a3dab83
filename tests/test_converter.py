import pytest

from gateway.converter import BoardConverter
from gateway.errors import BoardTranslationError

BOARD = {"size": 2, "turn": 1, "players": ["B", "R"], "layout": "B/.R"}


@pytest.fixture
def converter():
    return BoardConverter()


def test_reset_payload_is_the_board(converter):
    response = converter.convert_reset_payload(BOARD)

    assert response.model_dump() == {"board": BOARD}


def test_move_payload(converter):
    response = converter.convert_move_payload({"board": BOARD, "winner": 1})

    assert response.model_dump() == {"board": BOARD, "winner": 1}


def test_configured_board_key():
    converter = BoardConverter(board_key="state")
    payload = {"state": BOARD, "previous": dict(BOARD, layout="./..")}

    assert converter.find_board(payload) == BOARD


def test_ambiguous_nested_boards(converter):
    with pytest.raises(BoardTranslationError):
        converter.find_board({"a": BOARD, "b": BOARD})


@pytest.mark.parametrize(
    "raw_board",
    [
        {"size": 2, "layout": "B/.R"},
        {"size": 2, "turn": 0, "players": ["B", "R"], "layout": "B/.R/..."},
        {"size": "two", "turn": 0, "players": ["B", "R"], "layout": "B/.R"},
    ],
)
def test_malformed_boards(converter, raw_board):
    with pytest.raises(BoardTranslationError):
        converter.convert_board(raw_board)


@pytest.mark.parametrize("winner", ["0", True, 1.5])
def test_malformed_winner(converter, winner):
    with pytest.raises(BoardTranslationError):
        converter.convert_move_payload({"board": BOARD, "winner": winner})


def test_missing_winner_is_undecided(converter):
    assert converter.convert_move_payload({"board": BOARD}).winner is None
