"""공통 테스트 fixtures"""

import random

import pytest

from models.draw import Draw
from models.metrics import HistoricalMetrics, ParityCombination, SequenceStat


def make_draws(count, seed=42):
    """재현 가능한 모의 당첨 이력 생성 (오래된 회차부터)"""
    rng = random.Random(seed)
    return [
        Draw.from_raw(rng.sample(range(1, 26), 15), contest=i + 1)
        for i in range(count)
    ]


def build_metrics(frequency, delay, sequences=(), parity=((8, 7, 1),), total_draws=1):
    """직접 지정한 값으로 HistoricalMetrics 생성"""
    return HistoricalMetrics(
        frequency=frequency,
        delay=delay,
        sequences=tuple(SequenceStat(numbers=tuple(s), frequency=f) for s, f in sequences),
        even_odd_combinations=tuple(
            ParityCombination(evens=e, odds=o, frequency=f) for e, o, f in parity
        ),
        total_draws=total_draws
    )


@pytest.fixture
def three_draws():
    """{1..15}, {2..16}, {11..25} 세 회차"""
    return [
        Draw.from_raw(range(1, 16), contest=1),
        Draw.from_raw(range(2, 17), contest=2),
        Draw.from_raw(range(11, 26), contest=3),
    ]


@pytest.fixture
def sample_draws():
    """모의 당첨 이력 60회차"""
    return make_draws(60)


@pytest.fixture
def api_items():
    """결과 API 형식 항목 (최신 회차 먼저)"""
    return [
        {"concurso": 3, "data": "03/01/2024", "dezenas": [f"{n:02d}" for n in range(11, 26)]},
        {"concurso": 2, "data": "02/01/2024", "dezenas": [f"{n:02d}" for n in range(2, 17)]},
        {"concurso": 1, "data": "01/01/2024", "dezenas": [f"{n:02d}" for n in range(1, 16)]},
    ]
