# services/scoring_service.py
import logging
from typing import Dict

from config.settings import FREQUENCY_WEIGHT, DELAY_WEIGHT
from models.metrics import HistoricalMetrics
from utils.exceptions import DegenerateHistoryError

logger = logging.getLogger("lotofacil")


class NumberScorer:
    """빈도와 미출현 기간 기반 번호 점수 계산기

    score(n) = 0.6 * frequency[n] / max(frequency) + 0.4 * delay[n] / max(delay)
    """

    def __init__(self, metrics: HistoricalMetrics):
        self.metrics = metrics
        self.max_frequency = max(metrics.frequency.values(), default=0)
        self.max_delay = max(metrics.delay.values(), default=0)

        if self.max_frequency <= 0 or self.max_delay <= 0:
            logger.error(
                f"점수 정규화 불가: max_frequency={self.max_frequency}, max_delay={self.max_delay}"
            )
            raise DegenerateHistoryError(
                "점수를 정규화할 수 없습니다 (최대 빈도 또는 최대 미출현 기간이 0)"
            )

    def score(self, number: int) -> float:
        """단일 번호 점수"""
        freq_normalized = self.metrics.frequency[number] / self.max_frequency
        delay_normalized = self.metrics.delay[number] / self.max_delay
        return freq_normalized * FREQUENCY_WEIGHT + delay_normalized * DELAY_WEIGHT

    def score_all(self) -> Dict[int, float]:
        """전체 번호 점수"""
        return {number: self.score(number) for number in self.metrics.frequency}


def calculate_number_score(number: int, metrics: HistoricalMetrics) -> float:
    return NumberScorer(metrics).score(number)
