from __future__ import annotations

import logging

from pbkdf.service.hashing import HashLike, resolve_hash
from pbkdf.service.kdf import as_bytes, check_parameters

logger = logging.getLogger(__name__)


class PBKDF1:
    """PBKDF1 from RFC 8018, section 5.1.

    ``T_1 = Hash(P || S)``, ``T_i = Hash(T_{i-1})`` for ``i = 2..c``; the key is
    the first ``dkLen`` bytes of ``T_c``. One hash output is all the entropy
    there is, so keys longer than the digest are refused.
    """

    name = "pbkdf1"

    def max_key_length(self, hash_algorithm: HashLike) -> int:
        return resolve_hash(hash_algorithm).digest_size

    def derive(self, hash_algorithm: HashLike, password: bytes, salt: bytes,
               iterations: int, key_length: int) -> bytes:
        h = resolve_hash(hash_algorithm)
        check_parameters("PBKDF1", h, h.digest_size, iterations, key_length)
        logger.debug("PBKDF1 derive: hash=%s iterations=%d key_length=%d", h.name, iterations, key_length)

        ctx = h.new()
        t = as_bytes(password, "password") + as_bytes(salt, "salt")
        for _ in range(iterations):
            ctx.update(t)
            t = ctx.digest()
            ctx.reset()
        return t[:key_length]
