from __future__ import annotations

from pbkdf.service.errors import InvalidParameterError

_BYTEORDERS = ("big", "little")


def _check_byteorder(byteorder: str) -> None:
    if byteorder not in _BYTEORDERS:
        raise InvalidParameterError(f"byteorder must be 'big' or 'little', got {byteorder!r}")


def int_to_bytes(value: int, length: int, byteorder: str = "big") -> bytes:
    """Encode an unsigned integer into exactly ``length`` bytes.

    Bits that do not fit are dropped, so ``int_to_bytes(0x1_0000_0001, 4)``
    is ``b"\\x00\\x00\\x00\\x01"``.
    """
    _check_byteorder(byteorder)
    if value < 0:
        raise InvalidParameterError("value must not be negative")
    if length < 0:
        raise InvalidParameterError("length must not be negative")
    return (value % (1 << (8 * length))).to_bytes(length, byteorder)


def bytes_to_int(data: bytes, byteorder: str = "big") -> int:
    _check_byteorder(byteorder)
    return int.from_bytes(data, byteorder)
