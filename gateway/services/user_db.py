"""DB service layer for credential use cases.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session boundaries and the store timeout.
- Any store failure, including a timeout, leaves as CredentialStoreError.
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gateway.crud import CreateUser, ReadUser
from gateway.errors import CredentialStoreError
from gateway.models.dc_models import UserModel


async def create_user(
    session_factory: async_sessionmaker[AsyncSession],
    username: str,
    hash_password: str,
    age: int,
    country: str,
    timeout: float,
) -> None:
    async def _create() -> None:
        async with session_factory() as session:
            await CreateUser.create_user_data(
                username, hash_password, age, country, session
            )

    try:
        await asyncio.wait_for(_create(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logging.error(f"Credential store timeout while creating {username}")
        raise CredentialStoreError() from e
    except Exception as e:
        raise CredentialStoreError() from e


async def read_user(
    session_factory: async_sessionmaker[AsyncSession],
    username: str,
    timeout: float,
) -> UserModel | None:
    async def _read() -> UserModel | None:
        async with session_factory() as session:
            return await ReadUser.read_user_data(username, session)

    try:
        return await asyncio.wait_for(_read(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logging.error(f"Credential store timeout while reading {username}")
        raise CredentialStoreError() from e
    except Exception as e:
        raise CredentialStoreError() from e
