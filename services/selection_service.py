"""추천 게임 선택 서비스

같은 크기의 후보 게임을 여러 개 생성하고 평균 점수가 가장 높은 게임을 고릅니다.
"""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional

import numpy as np

from config.settings import DEFAULT_BATCH_COUNT
from models.game_analysis import GameAnalysis
from models.metrics import HistoricalMetrics
from services.game_evaluator import GameEvaluator
from services.game_generator import Chooser, GameGenerator, validate_game_size
from utils.exceptions import ValidationError

logger = logging.getLogger("lotofacil")


class SelectionService:
    """후보 게임 생성 및 최고 점수 게임 선택

    metrics는 읽기 전용이므로 후보 생성은 스레드 간에 공유 상태 없이 병렬로 실행할 수 있습니다.
    """

    def __init__(self, metrics: HistoricalMetrics, choice: Optional[Chooser] = None):
        self.metrics = metrics
        self.generator = GameGenerator(metrics, choice=choice)
        self.evaluator = GameEvaluator(metrics, scores=self.generator.scores)

    @staticmethod
    def _validate_batch_count(batch_count) -> int:
        if isinstance(batch_count, bool) or not isinstance(batch_count, int):
            raise ValidationError(
                f"batch_count must be an integer, got {type(batch_count).__name__}"
            )
        if batch_count < 1:
            raise ValidationError(f"batch_count must be at least 1, got {batch_count}")
        return batch_count

    def _evaluate_candidate(self, size: int) -> GameAnalysis:
        return self.evaluator.evaluate(self.generator.generate(size))

    @staticmethod
    def _select_best(candidates: List[GameAnalysis]) -> GameAnalysis:
        # np.argmax는 동점일 때 첫 번째 후보를 반환함
        best_index = int(np.argmax([c.avg_score for c in candidates]))
        return candidates[best_index]

    def generate_candidates(self, size: int, batch_count: int = DEFAULT_BATCH_COUNT) -> List[GameAnalysis]:
        """후보 게임 생성 및 평가 (생성 순서 유지)"""
        validate_game_size(size)
        self._validate_batch_count(batch_count)
        return [self._evaluate_candidate(size) for _ in range(batch_count)]

    def pick_best(self, size: int, batch_count: int = DEFAULT_BATCH_COUNT) -> GameAnalysis:
        """평균 점수가 가장 높은 후보 반환"""
        start_time = datetime.now()

        candidates = self.generate_candidates(size, batch_count)
        best = self._select_best(candidates)

        elapsed_time = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(
            f"추천 게임 선택 완료: 후보 {len(candidates)}개, 크기 {size}, "
            f"평균 점수 {best.avg_score:.4f}, 소요 시간: {elapsed_time:.2f}ms"
        )
        return best

    async def pick_best_async(self, size: int, batch_count: int = DEFAULT_BATCH_COUNT) -> GameAnalysis:
        """후보를 작업 스레드에서 병렬로 생성한 뒤 최고 점수 후보 반환"""
        validate_game_size(size)
        self._validate_batch_count(batch_count)

        candidates = await asyncio.gather(
            *(asyncio.to_thread(self._evaluate_candidate, size) for _ in range(batch_count))
        )
        best = self._select_best(list(candidates))

        logger.info(
            f"추천 게임 선택 완료 (비동기): 후보 {len(candidates)}개, 크기 {size}, "
            f"평균 점수 {best.avg_score:.4f}"
        )
        return best


def pick_best(metrics: HistoricalMetrics, size: int, batch_count: int = DEFAULT_BATCH_COUNT,
              choice: Optional[Chooser] = None) -> GameAnalysis:
    """후보 batch_count개 중 최고 평균 점수 게임 반환"""
    return SelectionService(metrics, choice=choice).pick_best(size, batch_count)
