import hashlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from helpers import reference_pbkdf2
from pbkdf.service.errors import InvalidIterationCountError, InvalidKeyLengthError, KeyTooLongError
from pbkdf.service.pbkdf2 import MAX_BLOCKS, PBKDF2


@pytest.mark.parametrize("name,c,dk_len", [
    ("sha1", 5, 40),
    ("sha1", 5, 45),
    ("sha256", 3, 1),
    ("sha512", 2, 130),
    ("sha1", 1, 20),
])
def test_matches_reference(name, c, dk_len):
    dk = PBKDF2().derive(name, b"password", b"salt", c, dk_len)
    assert len(dk) == dk_len
    assert dk == reference_pbkdf2(name, b"password", b"salt", c, dk_len)


def test_full_and_partial_last_block(sha1):
    engine = PBKDF2()
    whole = engine.derive(sha1, b"pw", b"salt", 10, 40)
    partial = engine.derive(sha1, b"pw", b"salt", 10, 45)
    assert len(whole) == 40
    assert len(partial) == 45
    # blocks are independent of the requested length
    assert partial[:40] == whole


def test_single_iteration_blocks(sha1):
    dk = PBKDF2().derive(sha1, b"pw", b"salt", 1, 40)
    assert dk[:20] == hashlib.sha1(b"pwsalt\x00\x00\x00\x01").digest()
    assert dk[20:] == hashlib.sha1(b"pwsalt\x00\x00\x00\x02").digest()


def test_two_iterations_chain_password(sha1):
    u1 = hashlib.sha1(b"pwsalt\x00\x00\x00\x01").digest()
    u2 = hashlib.sha1(b"pw" + u1).digest()
    expected = bytes(a ^ b for a, b in zip(u1, u2))
    assert PBKDF2().derive(sha1, b"pw", b"salt", 2, 20) == expected


def test_zero_length_key(sha1):
    assert PBKDF2().derive(sha1, b"pw", b"salt", 3, 0) == b""


def test_key_too_long(sha1):
    engine = PBKDF2()
    limit = MAX_BLOCKS * 20
    assert engine.max_key_length(sha1) == limit
    with pytest.raises(KeyTooLongError):
        engine.derive(sha1, b"pw", b"salt", 1, limit + 1)


def test_invalid_parameters(sha1):
    with pytest.raises(InvalidKeyLengthError):
        PBKDF2().derive(sha1, b"pw", b"salt", 1, -1)
    with pytest.raises(InvalidIterationCountError):
        PBKDF2().derive(sha1, b"pw", b"salt", 0, 20)


def test_fixed_salt_scenario(sha1):
    salt = bytes(range(16))
    first = PBKDF2().derive(sha1, b"hunter2", salt, 1000, 20)
    second = PBKDF2().derive(sha1, b"hunter2", salt, 1000, 20)
    assert first == second
    assert len(first) == 20
    assert PBKDF2().derive(sha1, b"hunter2", salt, 1001, 20) != first


def test_shared_engine_across_threads():
    engine = PBKDF2()
    jobs = [("sha1", b"alpha", 45), ("sha256", b"beta", 64), ("sha512", b"gamma", 10)] * 4
    expected = [reference_pbkdf2(name, pw, b"salt", 20, n) for name, pw, n in jobs]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda job: engine.derive(job[0], job[1], b"salt", 20, job[2]), jobs))
    assert results == expected


@pytest.mark.parametrize("password,salt", [(5, b"salt"), (b"pw", 4), ("pw", b"salt")])
def test_rejects_non_bytes_arguments(sha1, password, salt):
    with pytest.raises(TypeError):
        PBKDF2().derive(sha1, password, salt, 1, 20)
