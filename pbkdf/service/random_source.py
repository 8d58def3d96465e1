from __future__ import annotations

import logging
import secrets
from typing import Protocol, runtime_checkable

from pbkdf.service.errors import InvalidParameterError, RandomSourceError

logger = logging.getLogger(__name__)


@runtime_checkable
class SecureRandomSource(Protocol):
    def get_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Random bytes from the operating system (``secrets.token_bytes``).

    Safe to share between threads.
    """

    def get_bytes(self, n: int) -> bytes:
        if n < 0:
            raise InvalidParameterError("number of random bytes must not be negative")
        try:
            data = secrets.token_bytes(n)
        except OSError as e:
            logger.warning("System entropy source failed while reading %d bytes: %s", n, e)
            raise RandomSourceError(f"could not read {n} random bytes") from e
        if len(data) != n:
            raise RandomSourceError(f"short read from entropy source: wanted {n}, got {len(data)}")
        return data


default_random_source = SystemRandomSource()
