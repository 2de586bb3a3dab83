"""Error taxonomy of the gateway.

Every failure that reaches a client is one of these exceptions. The message is
what the client sees, so it must never carry credentials, stack traces or
internal identifiers.
"""

from fastapi import status


class GatewayError(Exception):
    """Base exception for errors converted to a JSON ``{"error": ...}`` body."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RequestValidationFailed(GatewayError):
    """Missing or malformed client input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class UserConflictError(GatewayError):
    """Registration could not be stored.

    Duplicate usernames and store failures share this message so that callers
    cannot tell which usernames exist.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists or database error"


class AuthenticationFailed(GatewayError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password"


class UserNotFoundError(AuthenticationFailed):
    default_message = "User not found"


class InvalidPasswordError(AuthenticationFailed):
    default_message = "Contraseña incorrecta"


class CredentialStoreError(GatewayError):
    """The credential store failed, timed out or was unreachable."""

    default_message = "Error communicating with the credential store"


class EngineCommunicationError(GatewayError):
    """Transport failure, timeout or unreadable JSON from the game engine."""

    default_message = "Error communicating with the game engine"


class EngineResponseError(GatewayError):
    """The game engine answered with a non-success status.

    The engine's raw text is passed through so operators can diagnose it.
    """

    def __init__(self, text: str, engine_status: int | None = None):
        self.engine_status = engine_status
        super().__init__(text or f"Game engine error (status {engine_status})")


class BoardTranslationError(GatewayError):
    """The engine returned something that is not a well-formed board."""

    default_message = "Invalid board received from the game engine"
