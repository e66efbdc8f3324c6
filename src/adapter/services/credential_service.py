"""PBKDF2 Credential Service

Passwords: salted PBKDF2-HMAC-SHA256, stored as
``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.
Tokens: random url-safe strings, stored as SHA-256 hex digests.
"""

import hashlib
import hmac
import secrets
from typing import Tuple
from src.app.services.credential_service import CredentialService

ALGORITHM = "pbkdf2_sha256"


class Pbkdf2CredentialService(CredentialService):

    def __init__(self, iterations: int = 390000, token_bytes: int = 40):
        self.iterations = iterations
        self.token_bytes = token_bytes

    def hash_password(self, password: str) -> str:
        salt = secrets.token_hex(16)
        digest = self._derive(password, salt, self.iterations)
        return f"{ALGORITHM}${self.iterations}${salt}${digest}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            algorithm, iterations, salt, expected = password_hash.split("$")
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        digest = self._derive(password, salt, int(iterations))
        return hmac.compare_digest(digest, expected)

    def issue_token(self) -> Tuple[str, str]:
        plain_token = secrets.token_urlsafe(self.token_bytes)
        return plain_token, self.hash_token(plain_token)

    def hash_token(self, plain_token: str) -> str:
        return hashlib.sha256(plain_token.encode("utf-8")).hexdigest()

    @staticmethod
    def _derive(password: str, salt: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
        ).hex()
