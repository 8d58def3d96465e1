from __future__ import annotations

"""Text form of a stored credential.

    <base64(salt)>:<iteration count>:<base64(derived key)>

Standard base64 alphabet with padding, decimal iteration count, no trailing
newline. Parsing is purely syntactic: range checks on the iteration count
and key length are left to the engine that re-derives the key.
"""

import base64
import binascii
import re

from pbkdf.models.credential import CredentialRecord
from pbkdf.service.errors import RecordFormatError

SEPARATOR = ":"

# iteration counts are stored as signed 64-bit integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def serialize_record(salt: bytes, iteration_count: int, derived_key: bytes) -> str:
    return SEPARATOR.join((
        base64.b64encode(salt).decode("ascii"),
        str(int(iteration_count)),
        base64.b64encode(derived_key).decode("ascii"),
    ))


def serialize(record: CredentialRecord) -> str:
    return serialize_record(record.salt, record.iteration_count, record.derived_key)


def _decode_b64(field: str, what: str) -> bytes:
    try:
        raw = field.encode("ascii")
        decoded = base64.b64decode(raw, validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise RecordFormatError(f"invalid base64 in {what} field") from e
    # b64decode tolerates surplus "=" padding; only the canonical encoding is a valid field
    if base64.b64encode(decoded) != raw:
        raise RecordFormatError(f"non-canonical base64 in {what} field")
    return decoded


def parse_record(text: str) -> CredentialRecord:
    fields = text.split(SEPARATOR)
    if len(fields) != 3:
        raise RecordFormatError(
            "credential record must contain the salt, iteration count and key separated by colons"
        )
    salt_field, count_field, key_field = fields

    salt = _decode_b64(salt_field, "salt")

    if not _DECIMAL.fullmatch(count_field):
        raise RecordFormatError(f"iteration count is not a decimal integer: {count_field!r}")
    iteration_count = int(count_field)
    if not _INT64_MIN <= iteration_count <= _INT64_MAX:
        raise RecordFormatError("iteration count out of range")

    derived_key = _decode_b64(key_field, "derived key")
    return CredentialRecord(salt=salt, iteration_count=iteration_count, derived_key=derived_key)
