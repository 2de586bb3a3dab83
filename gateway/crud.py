import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.models.dc_models import UserModel
from gateway.models.schemas import UserTable


class CreateUser:
    @staticmethod
    async def create_user_data(
        username: str, hash_password: str, age: int, country: str, session: AsyncSession
    ) -> None:
        """Insert a new user. Errors are logged and re-raised to the service layer.

        Args:
            username (str): Unique username
            hash_password (str): Encoded password hash, never the plaintext
            age (int): Age of the user
            country (str): Country of the user
            session (AsyncSession): Session owned by the caller
        """
        try:
            new_user = UserTable(
                username=username,
                hash_password=hash_password,
                age=age,
                country=country,
            )
            session.add(new_user)
            await session.commit()
        except Exception as e:
            await session.rollback()
            logging.error(f"Error creating user data: {e}")
            raise


class ReadUser:
    @staticmethod
    async def read_user_data(username: str, session: AsyncSession) -> UserModel | None:
        """Read a user by exact username

        Args:
            username (str): username of the user
            session (AsyncSession): Session owned by the caller

        Returns:
            UserModel | None: The stored user, None if there is no such user
        """
        try:
            stmt = select(UserTable).where(UserTable.username == username)
            result = await session.execute(stmt)
            result = result.scalars().first()
        except Exception as e:
            logging.error(f"Error reading user data: {e}")
            raise

        if result is None:
            logging.info(f"User not found: {username}")
            return None
        return UserModel.model_validate(result)
