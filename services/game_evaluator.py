# services/game_evaluator.py
from typing import Dict, Optional, Sequence
import logging
import numpy as np

from config.settings import (
    NUMBER_RANGES, HOT_FREQUENCY_THRESHOLD, COLD_DELAY_THRESHOLD
)
from models.game_analysis import GameAnalysis
from models.metrics import HistoricalMetrics
from services.scoring_service import NumberScorer
from utils.exceptions import ValidationError
from utils.validators import LotofacilValidator

logger = logging.getLogger("lotofacil")


class GameEvaluator:
    """생성된 게임 통계 계산"""

    def __init__(self, metrics: HistoricalMetrics, scores: Optional[Dict[int, float]] = None):
        self.metrics = metrics
        self.scores = scores if scores is not None else NumberScorer(metrics).score_all()

    def evaluate(self, game: Sequence[int]) -> GameAnalysis:
        """게임 분석"""
        if not game:
            raise ValidationError("평가할 번호가 없습니다")

        if not LotofacilValidator.validate_numbers(list(game), count=len(game)):
            raise ValidationError(f"1-25 사이의 중복 없는 번호만 평가할 수 있습니다: {list(game)}")

        numbers = tuple(sorted(game))
        game_set = set(numbers)

        evens = sum(1 for n in numbers if n % 2 == 0)
        ranges = {
            label: sum(1 for n in numbers if low <= n <= high)
            for label, (low, high) in NUMBER_RANGES.items()
        }
        sequence_count = sum(
            1 for seq in self.metrics.sequences if game_set.issuperset(seq.numbers)
        )
        avg_score = float(np.mean([self.scores[n] for n in numbers]))
        hot_numbers = sum(1 for n in numbers if self.metrics.frequency[n] > HOT_FREQUENCY_THRESHOLD)
        cold_numbers = sum(1 for n in numbers if self.metrics.delay[n] > COLD_DELAY_THRESHOLD)

        return GameAnalysis(
            game=numbers,
            evens=evens,
            odds=len(numbers) - evens,
            ranges=ranges,
            sequence_count=sequence_count,
            avg_score=avg_score,
            hot_numbers=hot_numbers,
            cold_numbers=cold_numbers
        )


def evaluate_game(game: Sequence[int], metrics: HistoricalMetrics) -> GameAnalysis:
    return GameEvaluator(metrics).evaluate(game)
