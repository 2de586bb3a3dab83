import hashlib
import secrets

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


class PasswordHasher:
    """Salted PBKDF2-HMAC-SHA256 hashing with an optional pepper.

    Encoded hashes look like ``pbkdf2_sha256$<iterations>$<salt>$<hexdigest>`` so
    that the iteration count can be raised without breaking stored users.
    """

    def __init__(self, iterations: int = 310000, pepper: str = ""):
        self.iterations = iterations
        self.pepper = pepper

    def _digest(self, password: str, salt: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256",
            (password + self.pepper).encode(),
            salt.encode(),
            iterations,
        ).hex()

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt

        Args:
            password (str): Plaintext password

        Returns:
            str: Encoded hash to store
        """
        salt = secrets.token_hex(SALT_BYTES)
        digest = self._digest(password, salt, self.iterations)
        return f"{ALGORITHM}${self.iterations}${salt}${digest}"

    def verify(self, password: str, encoded: str) -> bool:
        """Check a password against an encoded hash

        Args:
            password (str): Plaintext password to check
            encoded (str): Hash produced by ``hash``

        Returns:
            bool: True if the password matches
        """
        try:
            algorithm, iterations, salt, digest = encoded.split("$")
            iterations = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        candidate = self._digest(password, salt, iterations)
        return secrets.compare_digest(candidate, digest)
