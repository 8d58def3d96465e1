from __future__ import annotations

from typing import Dict, Protocol, Union, runtime_checkable

from pbkdf.service.errors import (
    InvalidIterationCountError,
    InvalidParameterError,
    InvalidKeyLengthError,
    KeyTooLongError,
)
from pbkdf.service.hashing import HashAlgorithm, HashLike


@runtime_checkable
class KeyDerivationFunction(Protocol):
    """Contract shared by the PBKDF1 and PBKDF2 engines."""

    name: str

    def max_key_length(self, hash_algorithm: HashLike) -> int: ...

    def derive(
        self,
        hash_algorithm: HashLike,
        password: bytes,
        salt: bytes,
        iterations: int,
        key_length: int,
    ) -> bytes: ...


def as_bytes(value: object, what: str) -> bytes:
    """Copy a bytes-like argument. Other types, ints included, raise TypeError."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, not {type(value).__name__}")
    return bytes(value)


def check_parameters(engine_name: str, hash_algorithm: HashAlgorithm, max_key_length: int,
                     iterations: int, key_length: int) -> None:
    """Validate derivation parameters; key-too-long first, then length sign, then iterations."""
    if key_length > max_key_length:
        raise KeyTooLongError(
            f"{engine_name}: derived key too long ({key_length} bytes, "
            f"max {max_key_length} for {hash_algorithm.name})"
        )
    if key_length < 0:
        raise InvalidKeyLengthError(f"{engine_name}: derived key length must not be negative")
    if iterations <= 0:
        raise InvalidIterationCountError(f"{engine_name}: iteration count must be positive")


def get_engine(engine: Union[str, KeyDerivationFunction]) -> KeyDerivationFunction:
    """Look an engine up by name ("pbkdf1" / "pbkdf2"); engine objects pass through."""
    if not isinstance(engine, str):
        if not isinstance(engine, KeyDerivationFunction):
            raise InvalidParameterError(f"Not a key derivation engine: {engine!r}")
        return engine
    # imported here: the engine modules import this one
    from pbkdf.service.pbkdf1 import PBKDF1
    from pbkdf.service.pbkdf2 import PBKDF2

    engines: Dict[str, KeyDerivationFunction] = {"pbkdf1": PBKDF1(), "pbkdf2": PBKDF2()}
    try:
        return engines[engine.lower()]
    except KeyError:
        raise InvalidParameterError(f"Unknown key derivation engine: {engine!r}") from None
