"""Credential Service Interface

Password hashing and API token issuance.
"""

from abc import ABC, abstractmethod
from typing import Tuple


class CredentialService(ABC):

    @abstractmethod
    def hash_password(self, password: str) -> str:
        pass

    @abstractmethod
    def verify_password(self, password: str, password_hash: str) -> bool:
        pass

    @abstractmethod
    def issue_token(self) -> Tuple[str, str]:
        """
        Create a new API token

        Returns:
            (plain_token, token_hash) - only the hash is stored
        """
        pass

    @abstractmethod
    def hash_token(self, plain_token: str) -> str:
        pass
