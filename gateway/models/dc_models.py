from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _require_credentials(data: dict) -> tuple[str, str]:
    username = _as_text(data.get("username")).strip()
    password = _as_text(data.get("password"))
    if not username or not password:
        raise PydanticCustomError(
            "credentials_required", "Username and password are required"
        )
    return username, password


CUSTOM_ERROR_TYPES = {"credentials_required", "age_type", "country_required", "cell_index"}


class UserModel(BaseModel):
    """A stored user as read from the credential store."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    hash_password: str
    age: int
    country: str
    score: Optional[int] = None
    created_at: Optional[datetime] = None


class CreateUserRequest(BaseModel):
    """Body of POST /createuser. Values are coerced to text before checking."""

    username: str
    password: str
    age: int
    country: str

    @model_validator(mode="before")
    @classmethod
    def coerce_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        username, password = _require_credentials(data)
        age = _as_int(data.get("age"))
        if age is None:
            raise PydanticCustomError("age_type", "Age must be a number")
        country = _as_text(data.get("country")).strip()
        if not country:
            raise PydanticCustomError("country_required", "Country is required")
        return {
            "username": username,
            "password": password,
            "age": age,
            "country": country,
        }


class LoginRequest(BaseModel):
    username: str
    password: str

    @model_validator(mode="before")
    @classmethod
    def coerce_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        username, password = _require_credentials(data)
        return {"username": username, "password": password}


class MoveRequest(BaseModel):
    """Body of POST /move. ``player`` is sent by the web client but not forwarded."""

    cell_index: int
    player: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def coerce_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cell_index = _as_int(data.get("cellIndex"))
        if cell_index is None or cell_index < 0:
            raise PydanticCustomError(
                "cell_index", "cellIndex must be a non-negative integer"
            )
        player = data.get("player")
        return {
            "cell_index": cell_index,
            "player": None if player is None else _as_text(player),
        }


class ResetRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BoardModel(BaseModel):
    """Board in the engine's YEN notation."""

    size: int
    turn: int
    players: List[str]
    layout: str


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    username: str
    score: Optional[int] = None


class MoveResponse(BaseModel):
    board: BoardModel
    winner: Optional[int]


class ResetResponse(BaseModel):
    board: BoardModel


class EngineStatusResponse(BaseModel):
    message: str
    engine: str


class ErrorResponse(BaseModel):
    error: str
