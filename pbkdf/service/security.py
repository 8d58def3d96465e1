from __future__ import annotations
from typing import Optional

from pbkdf.config import Settings, settings as default_settings
from pbkdf.service.password_service import Password, PasswordService

_service = PasswordService()

def hash_password(password: Password, settings: Optional[Settings] = None) -> str:
    s = settings or default_settings
    return _service.encode_password(
        s.DEFAULT_HASH, password, s.SALT_LENGTH, s.ITERATION_COUNT, s.KEY_LENGTH, s.DEFAULT_ENGINE
    )

def verify_password(password: Password, stored: str, settings: Optional[Settings] = None) -> bool:
    s = settings or default_settings
    return _service.verify_password(s.DEFAULT_HASH, password, stored, s.DEFAULT_ENGINE)
