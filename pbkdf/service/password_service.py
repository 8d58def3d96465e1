from __future__ import annotations

"""Encode a password into a storable credential string, and check a password against one.

The engine is a parameter, not part of the stored string: a record encoded
with PBKDF1 has to be verified with PBKDF1. The four ``*_pbkdf1`` /
``*_pbkdf2`` functions at the bottom pin the engine for callers that do not
want to pass it around.
"""

import hmac
import logging
from typing import Optional, Union

from pbkdf.data.record_codec import parse_record, serialize_record
from pbkdf.service.errors import InvalidParameterError, RandomSourceError, RecordFormatError
from pbkdf.service.hashing import HashLike, resolve_hash
from pbkdf.service.kdf import KeyDerivationFunction, as_bytes, get_engine
from pbkdf.service.random_source import SecureRandomSource, default_random_source

logger = logging.getLogger(__name__)

EngineLike = Union[str, KeyDerivationFunction]
Password = Union[str, bytes]


def _password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return as_bytes(password, "password")


class PasswordService:
    def __init__(self, random_source: Optional[SecureRandomSource] = None):
        self.random_source = random_source or default_random_source

    def encode_password(self, hash_algorithm: HashLike, password: Password, salt_length: int,
                        iteration_count: int, key_length: int, engine: EngineLike) -> str:
        """Derive a key from ``password`` under a fresh random salt and return the record string.

        Parameter errors from the engine are raised as-is; there is no retry,
        the same parameters would fail again.
        """
        kdf = get_engine(engine)
        h = resolve_hash(hash_algorithm)
        if salt_length < 0:
            raise InvalidParameterError("salt length must not be negative")

        try:
            salt = self.random_source.get_bytes(salt_length)
        except RandomSourceError:
            logger.warning("Salt generation failed (%d bytes)", salt_length)
            raise
        except OSError as e:
            logger.warning("Salt generation failed (%d bytes): %s", salt_length, e)
            raise RandomSourceError(f"could not generate a {salt_length}-byte salt") from e
        if len(salt) != salt_length:
            raise RandomSourceError(
                f"random source returned {len(salt)} bytes for a {salt_length}-byte salt"
            )

        derived_key = kdf.derive(h, _password_bytes(password), salt, iteration_count, key_length)
        logger.debug("Encoded password with %s/%s, %d iterations", kdf.name, h.name, iteration_count)
        return serialize_record(salt, iteration_count, derived_key)

    def verify_password(self, hash_algorithm: HashLike, password: Password, record: str,
                        engine: EngineLike) -> bool:
        """True if ``password`` matches ``record``.

        A wrong password is ``False``. A malformed record or parameters the
        engine rejects raise.
        """
        kdf = get_engine(engine)
        h = resolve_hash(hash_algorithm)
        try:
            stored = parse_record(record)
        except RecordFormatError as e:
            logger.warning("Could not parse credential record: %s", e)
            raise

        candidate = kdf.derive(
            h, _password_bytes(password), stored.salt, stored.iteration_count, len(stored.derived_key)
        )
        if len(candidate) != len(stored.derived_key):
            return False
        return hmac.compare_digest(candidate, stored.derived_key)


_default_service = PasswordService()


# ---------- fixed engine bindings ----------

def encode_password_pbkdf1(hash_algorithm: HashLike, password: Password, salt_length: int,
                           iteration_count: int, key_length: int) -> str:
    return _default_service.encode_password(
        hash_algorithm, password, salt_length, iteration_count, key_length, "pbkdf1"
    )


def encode_password_pbkdf2(hash_algorithm: HashLike, password: Password, salt_length: int,
                           iteration_count: int, key_length: int) -> str:
    return _default_service.encode_password(
        hash_algorithm, password, salt_length, iteration_count, key_length, "pbkdf2"
    )


def verify_password_pbkdf1(hash_algorithm: HashLike, password: Password, record: str) -> bool:
    return _default_service.verify_password(hash_algorithm, password, record, "pbkdf1")


def verify_password_pbkdf2(hash_algorithm: HashLike, password: Password, record: str) -> bool:
    return _default_service.verify_password(hash_algorithm, password, record, "pbkdf2")
