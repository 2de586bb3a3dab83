import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from gateway.domain.board_rules import TOPOLOGIES

DEFAULT_SQLITE_URL = "sqlite+aiosqlite:///./users.sqlite3"


class GatewaySettings(BaseModel):
    """Process-wide configuration, built once at startup and passed to create_app."""

    model_config = ConfigDict(frozen=True)

    database_url: str = DEFAULT_SQLITE_URL
    engine_url: str = "http://localhost:8080"
    engine_timeout: float = 5.0
    engine_board_key: str = "board"
    board_topology: str = "triangular"
    store_timeout: float = 5.0
    pepper_data: str = ""
    hash_iterations: int = 310000
    login_generic_errors: bool = False
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    port: int = 3000

    @field_validator("engine_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("board_topology")
    @classmethod
    def check_topology(cls, value: str) -> str:
        value = value.lower()
        if value not in TOPOLOGIES:
            raise ValueError(f"Unknown board topology: {value}")
        return value


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("DB_HOST")
    if not host:
        return DEFAULT_SQLITE_URL
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASSWORD")
    port = os.getenv("DB_PORT", "5432")
    db_name = os.getenv("DB_NAME")
    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"


def load_settings() -> GatewaySettings:
    """Read the environment (and a .env file if present) into GatewaySettings.

    Returns:
        GatewaySettings: Immutable settings for one gateway process
    """
    load_dotenv(find_dotenv(usecwd=True))

    values = {"database_url": _database_url()}
    env_names = {
        "engine_url": "ENGINE_URL",
        "engine_timeout": "ENGINE_TIMEOUT",
        "engine_board_key": "ENGINE_BOARD_KEY",
        "board_topology": "BOARD_TOPOLOGY",
        "store_timeout": "STORE_TIMEOUT",
        "pepper_data": "PEPPER_DATA",
        "hash_iterations": "HASH_ITERATIONS",
        "login_generic_errors": "LOGIN_GENERIC_ERRORS",
        "log_level": "LOG_LEVEL",
        "port": "PORT",
    }
    for field, env_name in env_names.items():
        value = os.getenv(env_name)
        if value is not None and value != "":
            values[field] = value

    cors_origins = os.getenv("CORS_ORIGINS")
    if cors_origins:
        values["cors_origins"] = [
            origin.strip() for origin in cors_origins.split(",") if origin.strip()
        ]
    return GatewaySettings(**values)


if __name__ == "__main__":
    print(load_settings().model_dump(exclude={"pepper_data"}))
