from __future__ import annotations

"""Hash primitives the engines are built on.

The engines only need three things from a hash: its output size, a way to
get a fresh context, and on that context ``update`` / ``digest`` / ``reset``.
``HashlibAlgorithm`` covers the standard library's hashes and
``CryptographyAlgorithm`` wraps pyca/cryptography hash objects, so either
can be handed to the engines.
"""

import hashlib
from typing import Protocol, Union, runtime_checkable

from cryptography.hazmat.primitives import hashes

from pbkdf.service.errors import UnsupportedHashError


@runtime_checkable
class HashContext(Protocol):
    def update(self, data: bytes) -> None: ...

    def digest(self) -> bytes: ...

    def reset(self) -> None: ...


@runtime_checkable
class HashAlgorithm(Protocol):
    name: str

    @property
    def digest_size(self) -> int: ...

    def new(self) -> HashContext: ...


# ---------- hashlib ----------

class _HashlibContext:
    def __init__(self, name: str):
        self._name = name
        self._h = hashlib.new(name)

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def digest(self) -> bytes:
        return self._h.digest()

    def reset(self) -> None:
        self._h = hashlib.new(self._name)


class HashlibAlgorithm:
    def __init__(self, name: str):
        name = name.lower()
        try:
            probe = hashlib.new(name)
        except (ValueError, TypeError) as e:
            raise UnsupportedHashError(f"Unknown hash algorithm: {name!r}") from e
        if probe.digest_size <= 0:
            # shake_* and friends need an explicit output length
            raise UnsupportedHashError(f"Variable-length hash not supported: {name!r}")
        self.name = name
        self._digest_size = probe.digest_size

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def new(self) -> HashContext:
        return _HashlibContext(self.name)

    def __repr__(self) -> str:
        return f"HashlibAlgorithm({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HashlibAlgorithm) and other.name == self.name

    def __hash__(self) -> int:
        return hash(("hashlib", self.name))


# ---------- pyca/cryptography ----------

class _CryptographyContext:
    def __init__(self, algorithm: hashes.HashAlgorithm):
        self._algorithm = algorithm
        self._h = hashes.Hash(algorithm)

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def digest(self) -> bytes:
        # finalize() consumes the context; work on a copy so digest() can be repeated
        return self._h.copy().finalize()

    def reset(self) -> None:
        self._h = hashes.Hash(self._algorithm)


class CryptographyAlgorithm:
    def __init__(self, algorithm: hashes.HashAlgorithm):
        if not isinstance(algorithm, hashes.HashAlgorithm):
            raise UnsupportedHashError(f"Not a cryptography hash algorithm: {algorithm!r}")
        self._algorithm = algorithm
        self.name = algorithm.name

    @property
    def digest_size(self) -> int:
        return self._algorithm.digest_size

    def new(self) -> HashContext:
        return _CryptographyContext(self._algorithm)

    def __repr__(self) -> str:
        return f"CryptographyAlgorithm({self._algorithm!r})"


HashLike = Union[str, HashAlgorithm, hashes.HashAlgorithm]


def resolve_hash(hash_algorithm: HashLike) -> HashAlgorithm:
    """Turn a hash name, a cryptography hash or a ready adapter into a ``HashAlgorithm``."""
    if isinstance(hash_algorithm, str):
        return HashlibAlgorithm(hash_algorithm)
    if isinstance(hash_algorithm, hashes.HashAlgorithm):
        return CryptographyAlgorithm(hash_algorithm)
    if isinstance(hash_algorithm, HashAlgorithm):
        return hash_algorithm
    raise UnsupportedHashError(f"Cannot use {hash_algorithm!r} as a hash algorithm")


SHA1 = HashlibAlgorithm("sha1")
SHA224 = HashlibAlgorithm("sha224")
SHA256 = HashlibAlgorithm("sha256")
SHA384 = HashlibAlgorithm("sha384")
SHA512 = HashlibAlgorithm("sha512")
