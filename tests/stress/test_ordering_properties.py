"""Stress Tests - 정렬 관계 성질 검증

테스트 범위:
- 전순서성 (반사성, 반대칭성, 추이성)
- 무작위 상품명 샘플 (문자/숫자/사이즈 혼합)
- 동시 호출 안전성
"""

import functools
import itertools
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from proper_sort import Ordering, compare, natural_sorted, tokenize
from proper_sort.text.compare import compare_tokens


WORDS = [
    "T-Shirt", "t-shirt", "Crank", "Blue", "blue", "BLACK", "Black",
    "Extra", "Large", "Small", "XS", "xs", "M", "s/m", "L-XL", "Med",
    "mm", "36T", "48t", "172.5mm", "170mm", "08", "8", "1,000", "-5",
    "a", "A", "b2", "2b", "x-large", "Adapter", "P.M.", "to",
]


def _random_title(rng: random.Random) -> str:
    words = [rng.choice(WORDS) for _ in range(rng.randint(0, 4))]
    if rng.random() < 0.5:
        words.append(f"{rng.randint(0, 300)}{rng.choice(['', 'mm', 'T', '.5mm'])}")
    rng.shuffle(words)
    return " ".join(words)


@pytest.fixture(scope="module")
def sample() -> list[str]:
    rng = random.Random(20240517)
    return [_random_title(rng) for _ in range(45)]


class TestOrderingProperties:
    """무작위 샘플에 대한 정렬 관계 성질"""

    def test_reflexive(self, sample):
        for a in sample:
            assert compare(a, a) is Ordering.EQUAL

    def test_antisymmetric(self, sample):
        for a, b in itertools.product(sample, repeat=2):
            assert compare(a, b) == -compare(b, a)

    def test_transitive(self, sample):
        """a <= b, b <= c 이면 a <= c (동치 관계 포함)"""
        tokens = {s: tokenize(s).tokens for s in sample}

        def cmp(x, y):
            return compare_tokens(tokens[x], tokens[y])

        for a, b, c in itertools.product(sample, repeat=3):
            ab, bc = cmp(a, b), cmp(b, c)
            if ab is not Ordering.GREATER and bc is not Ordering.GREATER:
                expected = Ordering.EQUAL if ab is bc is Ordering.EQUAL else Ordering.LESS
                assert cmp(a, c) is expected, (a, b, c)

    def test_sorted_output_is_monotonic(self, sample):
        result = sorted(sample, key=functools.cmp_to_key(compare))

        for left, right in zip(result, result[1:]):
            assert compare(left, right) is not Ordering.GREATER

    def test_idempotent_tokenize(self, sample):
        for s in sample:
            assert tokenize(s) == tokenize(s)


class TestConcurrentCalls:
    """여러 스레드에서 동시에 정렬"""

    def test_parallel_sorts_agree(self, sample):
        expected = natural_sorted(sample)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: natural_sorted(sample), range(32)))

        assert all(result == expected for result in results)
