from __future__ import annotations

import pytest

from helpers import CountingRandomSource
from pbkdf.service.hashing import HashlibAlgorithm


@pytest.fixture
def counting_source() -> CountingRandomSource:
    return CountingRandomSource()


@pytest.fixture
def sha1() -> HashlibAlgorithm:
    return HashlibAlgorithm("sha1")


@pytest.fixture
def sha256() -> HashlibAlgorithm:
    return HashlibAlgorithm("sha256")
