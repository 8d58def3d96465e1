from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class CredentialRecord:
    """A stored password credential: the salt, the work factor and the derived key.

    Records do not say which engine or hash produced them; the caller has to
    keep track of that.
    """
    salt: bytes
    iteration_count: int
    derived_key: bytes

    def __iter__(self) -> Iterator[object]:
        # allows `salt, c, key = record`
        return iter((self.salt, self.iteration_count, self.derived_key))
