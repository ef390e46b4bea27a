# services/analysis_service.py
import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from config.settings import MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW, TOP_SEQUENCES
from models.draw import Draw
from models.metrics import HistoricalMetrics, ParityCombination, SequenceStat
from utils.exceptions import AnalysisError, DegenerateHistoryError

logger = logging.getLogger("lotofacil")


def find_consecutive_triples(numbers: Sequence[int]) -> List[Tuple[int, int, int]]:
    """오름차순 번호에서 값이 1씩 증가하는 3개 묶음을 모두 찾음"""
    ordered = sorted(numbers)
    triples = []
    for i in range(len(ordered) - 2):
        for j in range(i + 1, len(ordered) - 1):
            if ordered[j] - ordered[i] != 1:
                continue
            for k in range(j + 1, len(ordered)):
                if ordered[k] - ordered[j] == 1:
                    triples.append((ordered[i], ordered[j], ordered[k]))
    return triples


def analyze_history(draws: Sequence[Union[Draw, Iterable[Any]]]) -> HistoricalMetrics:
    """과거 당첨 이력 분석

    draws는 오래된 회차부터 최신 회차 순서여야 한다 (index 0 = 가장 오래된 회차).
    Draw가 아닌 항목은 번호 목록으로 보고 Draw.from_raw로 정규화한다.
    형식이 잘못된 회차는 MalformedDrawError를 그대로 전파한다.
    """
    if not draws:
        logger.error("분석할 당첨 데이터가 없습니다")
        raise DegenerateHistoryError("분석할 당첨 데이터가 없습니다")

    draws = [draw if isinstance(draw, Draw) else Draw.from_raw(draw) for draw in draws]

    try:
        frequency: Dict[int, int] = {n: 0 for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
        last_seen: Dict[int, Optional[int]] = {n: None for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
        sequence_counter = Counter()
        parity_counter = Counter()

        for index, draw in enumerate(draws):
            for num in draw.numbers:
                frequency[num] += 1
                last_seen[num] = index

            evens = sum(1 for n in draw.numbers if n % 2 == 0)
            parity_counter[(evens, NUMBERS_PER_DRAW - evens)] += 1

            sequence_counter.update(find_consecutive_triples(draw.numbers))

        total_draws = len(draws)
        delay = {
            num: total_draws if last is None else total_draws - last - 1
            for num, last in last_seen.items()
        }

        # Counter.most_common은 동률일 때 처음 등장한 순서를 유지함
        sequences = tuple(
            SequenceStat(numbers=seq, frequency=count)
            for seq, count in sequence_counter.most_common(TOP_SEQUENCES)
        )
        even_odd_combinations = tuple(
            ParityCombination(evens=evens, odds=odds, frequency=count)
            for (evens, odds), count in parity_counter.most_common()
        )

        logger.info(
            f"당첨 이력 분석 완료: {total_draws}개 회차, "
            f"연속 번호 {len(sequence_counter)}종, 짝홀 조합 {len(parity_counter)}종"
        )

        return HistoricalMetrics(
            frequency=frequency,
            delay=delay,
            sequences=sequences,
            even_odd_combinations=even_odd_combinations,
            total_draws=total_draws
        )
    except Exception as e:
        logger.error(f"당첨 이력 분석 오류: {e}")
        raise AnalysisError(f"당첨 이력 분석 중 오류 발생: {e}", original_error=e)


class AnalysisService:
    """로또파실 당첨 이력 분석 서비스"""

    def __init__(self, draws: List[Draw]):
        self.draws = draws
        self._metrics: Optional[HistoricalMetrics] = None

    def get_metrics(self) -> HistoricalMetrics:
        """분석 결과 반환 (한 번만 계산)"""
        if self._metrics is None:
            self._metrics = analyze_history(self.draws)
        return self._metrics

    def get_hot_numbers(self, limit: int = 10) -> List[int]:
        """출현 빈도가 높은 번호 (동률은 작은 번호 우선)"""
        frequency = self.get_metrics().frequency
        return sorted(frequency, key=lambda n: (-frequency[n], n))[:limit]

    def get_cold_numbers(self, limit: int = 10) -> List[int]:
        """미출현 기간이 긴 번호 (동률은 작은 번호 우선)"""
        delay = self.get_metrics().delay
        return sorted(delay, key=lambda n: (-delay[n], n))[:limit]
