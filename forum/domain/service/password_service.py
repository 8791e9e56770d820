"""Password hashing domain service."""

from forum.config import AuthSettings
from forum.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Hashes and checks user passwords with bcrypt."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.rounds = auth_settings.password_hash_rounds

    def hash_password(self, password: str) -> str:
        return hash_password(password, rounds=self.rounds)

    def verify_password(self, password: str, password_hash: str) -> bool:
        return verify_password(password, password_hash)
