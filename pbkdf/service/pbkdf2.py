from __future__ import annotations

import logging

from pbkdf.service.byteorder import int_to_bytes
from pbkdf.service.hashing import HashContext, HashLike, resolve_hash
from pbkdf.service.kdf import as_bytes, check_parameters

logger = logging.getLogger(__name__)

# RFC 8018 caps the block counter at 32 bits
MAX_BLOCKS = 2**32 - 1
BLOCK_INDEX_BYTEORDER = "big"


class PBKDF2:
    """PBKDF2 as stored credentials of this system were written.

    The block structure is RFC 8018's (``l`` blocks of ``hLen`` bytes, each
    the XOR of ``c`` chained PRF outputs, the last one truncated), but the PRF
    is the plain hash of the password prepended to the message rather than
    HMAC:

        U_1 = Hash(P || S || INT(i))
        U_j = Hash(P || U_{j-1})

    RFC 6070 test vectors therefore do not apply. Changing the PRF would make
    every existing record unverifiable.
    """

    name = "pbkdf2"

    def max_key_length(self, hash_algorithm: HashLike) -> int:
        return MAX_BLOCKS * resolve_hash(hash_algorithm).digest_size

    def derive(self, hash_algorithm: HashLike, password: bytes, salt: bytes,
               iterations: int, key_length: int) -> bytes:
        h = resolve_hash(hash_algorithm)
        h_len = h.digest_size
        check_parameters("PBKDF2", h, MAX_BLOCKS * h_len, iterations, key_length)

        blocks, remainder = divmod(key_length, h_len)
        if remainder:
            blocks += 1
        logger.debug(
            "PBKDF2 derive: hash=%s iterations=%d key_length=%d blocks=%d",
            h.name, iterations, key_length, blocks,
        )

        password, salt = as_bytes(password, "password"), as_bytes(salt, "salt")
        prf = h.new()
        dk = bytearray()
        for i in range(1, blocks + 1):
            dk += _block(prf, h_len, password, salt, iterations, i)
        # only the last block can be partial
        return bytes(dk[:key_length])


def _block(prf: HashContext, h_len: int, password: bytes, salt: bytes, iterations: int, index: int) -> bytes:
    """F(P, S, c, i): XOR of the ``c`` chained PRF outputs for block ``index``."""
    u = salt + int_to_bytes(index, 4, BLOCK_INDEX_BYTEORDER)
    acc = 0
    for _ in range(iterations):
        prf.update(password)
        prf.update(u)
        u = prf.digest()
        prf.reset()
        acc ^= int.from_bytes(u, "big")
    return acc.to_bytes(h_len, "big")
