from __future__ import annotations

"""Random numbers and passwords drawn from a SecureRandomSource.

Ranges are sampled by rejection, so every value in ``[low, high]`` is equally
likely. The password character set is always passed in; ``settings`` only
supplies the default.
"""

from typing import Optional

from pbkdf.config import settings
from pbkdf.service.byteorder import bytes_to_int
from pbkdf.service.errors import InvalidParameterError
from pbkdf.service.random_source import SecureRandomSource, default_random_source


def random_int(low: int, high: int, source: Optional[SecureRandomSource] = None) -> int:
    """Uniform integer in the inclusive range ``[low, high]``."""
    if high < low:
        raise InvalidParameterError("high must not be less than low")
    source = source or default_random_source
    span = high - low + 1
    if span == 1:
        return low

    n_bytes = ((span - 1).bit_length() + 7) // 8
    space = 1 << (8 * n_bytes)
    limit = space - space % span
    while True:
        value = bytes_to_int(source.get_bytes(n_bytes))
        if value < limit:
            return low + value % span


def random_byte(low: int = 0, high: int = 255, source: Optional[SecureRandomSource] = None) -> int:
    if not 0 <= low <= 255 or not 0 <= high <= 255:
        raise InvalidParameterError("byte bounds must be within 0..255")
    return random_int(low, high, source)


def random_choice(charset: str, source: Optional[SecureRandomSource] = None) -> str:
    if not charset:
        raise InvalidParameterError("charset must not be empty")
    return charset[random_int(0, len(charset) - 1, source)]


def generate_password(min_length: int, max_length: int, charset: Optional[str] = None,
                      source: Optional[SecureRandomSource] = None) -> str:
    """Random password whose length is drawn uniformly from ``[min_length, max_length]``."""
    if max_length < min_length:
        raise InvalidParameterError("max_length must not be less than min_length")
    if min_length < 0:
        raise InvalidParameterError("min_length must not be negative")
    if charset is None:
        charset = settings.PASSWORD_CHARSET

    length = random_int(min_length, max_length, source)
    return "".join(random_choice(charset, source) for _ in range(length))
