import random
import string

import pytest

from passgen.dto import CharacterClass, Criteria
from passgen.exc import CriteriaError, NoCharacterClassError
from passgen.generator import Generator


def test_generate_draws_from_included_pool_only(
    criteria: Criteria, rng: random.Random
) -> None:
    criteria.length = 10
    criteria.classes[0].included = True

    for _ in range(50):
        password = Generator(rng=rng).generate(criteria)
        assert len(password) == 10
        assert set(password) <= set(string.ascii_lowercase)


def test_generate_is_reproducible_with_seed(criteria: Criteria) -> None:
    criteria.length = 32
    for cc in criteria.classes:
        cc.included = True

    first = Generator(rng=random.Random(7)).generate(criteria)
    second = Generator(rng=random.Random(7)).generate(criteria)

    assert first == second


def test_generate_pools_in_declaration_order(criteria: Criteria) -> None:
    class RecordingRandom(random.Random):
        pools: list[str] = []

        def choice(self, seq):  # type: ignore[override]
            self.pools.append(seq)
            return seq[0]

    criteria.length = 3
    criteria.classes[2].included = True
    criteria.classes[0].included = True

    password = Generator(rng=RecordingRandom()).generate(criteria)

    assert RecordingRandom.pools[0] == string.ascii_lowercase + string.digits
    assert password == "aaa"


def test_generate_keeps_overlapping_pools() -> None:
    criteria = Criteria(
        length=8,
        classes=[
            CharacterClass(name="Vowels", characters="aeiou", included=True),
            CharacterClass(name="Letters", characters="abc", included=True),
        ],
    )

    class PoolSpy(random.Random):
        pool = ""

        def choice(self, seq):  # type: ignore[override]
            PoolSpy.pool = seq
            return super().choice(seq)

    Generator(rng=PoolSpy(0)).generate(criteria)

    assert PoolSpy.pool == "aeiouabc"


def test_generate_without_length(criteria: Criteria) -> None:
    criteria.classes[0].included = True

    with pytest.raises(CriteriaError):
        Generator().generate(criteria)


def test_generate_without_classes(criteria: Criteria) -> None:
    criteria.length = 12

    with pytest.raises(NoCharacterClassError) as ex_info:
        Generator().generate(criteria)

    assert "at least one type of character" in str(ex_info.value)


def test_default_source_is_system_random() -> None:
    assert isinstance(Generator().rng, random.SystemRandom)
