from __future__ import annotations

import hashlib
import itertools


def reference_pbkdf1(name: str, password: bytes, salt: bytes, c: int, dk_len: int) -> bytes:
    t = password + salt
    for _ in range(c):
        t = hashlib.new(name, t).digest()
    return t[:dk_len]


def reference_pbkdf2(name: str, password: bytes, salt: bytes, c: int, dk_len: int) -> bytes:
    """Straight-line rewrite of the legacy PBKDF2 construction, hashlib only."""
    out = b""
    i = 1
    while len(out) < dk_len:
        u = hashlib.new(name, password + salt + i.to_bytes(4, "big")).digest()
        block = bytearray(u)
        for _ in range(c - 1):
            u = hashlib.new(name, password + u).digest()
            block = bytearray(a ^ b for a, b in zip(block, u))
        out += bytes(block)
        i += 1
    return out[:dk_len]


class CountingRandomSource:
    """Deterministic stand-in for the OS entropy pool: 0x00, 0x01, 0x02, ..."""

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)
        self.calls: list[int] = []

    def get_bytes(self, n: int) -> bytes:
        self.calls.append(n)
        return bytes(next(self._counter) % 256 for _ in range(n))


class ScriptedRandomSource:
    """Replays the given chunks in order, one per call."""

    def __init__(self, *chunks: bytes):
        self._chunks = list(chunks)

    def get_bytes(self, n: int) -> bytes:
        chunk = self._chunks.pop(0)
        assert len(chunk) == n
        return chunk
