import random

import pytest

from passgen.dto import Criteria


@pytest.fixture
def criteria() -> Criteria:
    return Criteria.default()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
