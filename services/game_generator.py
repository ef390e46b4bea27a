"""통계 기반 로또파실 게임 생성기

과거 이력에서 계산한 번호 점수 순서대로 번호를 고르되,
가장 흔한 짝홀 비율과 5개 단위 구간 분포를 넘지 않도록 제한합니다.
게임은 자주 나온 연속 번호 3개 중 하나로 시작합니다.
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from config.settings import (
    MIN_GAME_SIZE, MAX_GAME_SIZE, NUMBERS_PER_DRAW, NUMBER_RANGES,
    SEED_SEQUENCE_POOL, get_range_label
)
from models.metrics import HistoricalMetrics, SequenceStat
from services.scoring_service import NumberScorer
from utils.exceptions import DegenerateHistoryError, InvalidSizeError

logger = logging.getLogger("lotofacil")

Chooser = Callable[[Sequence[SequenceStat]], SequenceStat]


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def validate_game_size(size) -> int:
    """게임 크기 검증 (15-20)"""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"size must be an integer, got {type(size).__name__}")

    if not MIN_GAME_SIZE <= size <= MAX_GAME_SIZE:
        raise InvalidSizeError(
            f"size must be between {MIN_GAME_SIZE} and {MAX_GAME_SIZE}, got {size}"
        )
    return size


def rank_numbers(scores: Dict[int, float]) -> List[int]:
    """점수 내림차순 정렬, 동점이면 작은 번호 우선"""
    return sorted(scores, key=lambda n: (-scores[n], n))


@dataclass
class GameDraft:
    """생성 중인 게임과 짝홀/구간 집계"""
    numbers: List[int] = field(default_factory=list)
    evens: int = 0
    odds: int = 0
    range_count: Dict[str, int] = field(default_factory=lambda: {label: 0 for label in NUMBER_RANGES})

    def add(self, number: int):
        self.numbers.append(number)
        if number % 2 == 0:
            self.evens += 1
        else:
            self.odds += 1
        self.range_count[get_range_label(number)] += 1

    def __contains__(self, number: int) -> bool:
        return number in self.numbers

    def __len__(self) -> int:
        return len(self.numbers)


class GameGenerator:
    """제약 조건 기반 게임 생성기

    Args:
        metrics: 과거 이력 통계
        choice: 상위 연속 번호 중 하나를 고르는 함수. 테스트에서 고정값을 주입할 수 있습니다.
    """

    def __init__(self, metrics: HistoricalMetrics, choice: Optional[Chooser] = None):
        if not metrics.even_odd_combinations:
            raise DegenerateHistoryError("짝홀 조합 통계가 없습니다")

        self.metrics = metrics
        self.choice = choice or secrets.SystemRandom().choice
        self.scores = NumberScorer(metrics).score_all()
        self.ranked_numbers = rank_numbers(self.scores)

    def parity_caps(self, size: int) -> Tuple[int, int]:
        """게임 크기에 맞춘 짝수/홀수 최대 개수"""
        ideal = self.metrics.ideal_parity
        return (
            _ceil_div(ideal.evens * size, NUMBERS_PER_DRAW),
            _ceil_div(ideal.odds * size, NUMBERS_PER_DRAW)
        )

    @staticmethod
    def range_cap(size: int) -> int:
        """구간별 최대 개수"""
        return _ceil_div(size, len(NUMBER_RANGES))

    def seed(self) -> GameDraft:
        """상위 연속 번호 중 하나로 시작"""
        draft = GameDraft()
        top_sequences = self.metrics.sequences[:SEED_SEQUENCE_POOL]
        if not top_sequences:
            logger.warning("연속 번호 통계가 없어 시드 없이 생성합니다")
            return draft

        chosen = self.choice(top_sequences)
        for num in chosen.numbers:
            draft.add(num)
        logger.debug(f"시드 연속 번호: {chosen.numbers}")
        return draft

    def fill_with_constraints(self, draft: GameDraft, size: int) -> GameDraft:
        """짝홀/구간 상한을 지키면서 점수 순으로 번호 추가"""
        max_evens, max_odds = self.parity_caps(size)
        max_per_range = self.range_cap(size)

        for num in self.ranked_numbers:
            if len(draft) >= size:
                break
            if num in draft:
                continue
            if num % 2 == 0 and draft.evens >= max_evens:
                continue
            if num % 2 != 0 and draft.odds >= max_odds:
                continue
            if draft.range_count[get_range_label(num)] >= max_per_range:
                continue
            draft.add(num)

        return draft

    def fill_remaining(self, draft: GameDraft, size: int) -> GameDraft:
        """제약 조건으로 채우지 못한 자리를 점수 순으로 채움"""
        if len(draft) < size:
            logger.debug(f"제약 조건 완화: {size - len(draft)}개 번호 추가")
        for num in self.ranked_numbers:
            if len(draft) >= size:
                break
            if num not in draft:
                draft.add(num)
        return draft

    def generate(self, size: int) -> Tuple[int, ...]:
        """size개 번호로 이루어진 게임 생성

        Returns:
            오름차순으로 정렬된 번호 튜플

        Raises:
            InvalidSizeError: size가 15-20 범위를 벗어난 경우
        """
        validate_game_size(size)

        draft = self.fill_with_constraints(self.seed(), size)
        draft = self.fill_remaining(draft, size)

        return tuple(sorted(draft.numbers))


def generate_game(metrics: HistoricalMetrics, size: int,
                  choice: Optional[Chooser] = None) -> Tuple[int, ...]:
    """단일 게임 생성"""
    validate_game_size(size)
    return GameGenerator(metrics, choice=choice).generate(size)
