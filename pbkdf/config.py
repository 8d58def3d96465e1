from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Settings:
    DEFAULT_ENGINE: str = "pbkdf2"
    DEFAULT_HASH: str = "sha256"
    SALT_LENGTH: int = 16
    ITERATION_COUNT: int = 100_000
    KEY_LENGTH: int = 32
    PASSWORD_CHARSET: str = (
        "!@#$%&*()-_+=[]{}^~?/:;<>.,"
        "abcdefghijklmnopqrstuvwxyz"
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "0123456789"
    )

settings = Settings()
