# services/data_service.py
import logging
from typing import List, Optional
from config.settings import RESULTS_NEWEST_FIRST
from models.draw import Draw
from services.results_service import ResultsService
from utils.exceptions import DataLoadError, MalformedDrawError

logger = logging.getLogger("lotofacil")


class AsyncDataService:
    """비동기 로또파실 당첨 데이터 관리 서비스

    draws는 항상 오래된 회차부터 최신 회차 순서로 유지된다.
    """

    def __init__(self, results_service: Optional[ResultsService] = None,
                 newest_first: bool = RESULTS_NEWEST_FIRST):
        self.results_service = results_service or ResultsService()
        self.newest_first = newest_first
        self.draws: List[Draw] = []

    async def load_historical_data(self, use_remote: bool = True) -> List[Draw]:
        """역대 당첨 데이터 로드 (비동기)"""
        raw_data = await self.results_service.fetch_results(use_remote=use_remote)

        if not raw_data:
            logger.error("역대 데이터가 비어 있습니다")
            raise DataLoadError("역대 데이터가 비어 있습니다")

        if self.newest_first:
            raw_data = list(reversed(raw_data))

        draws = []
        for position, item in enumerate(raw_data):
            try:
                draws.append(Draw.from_api_item(item))
            except MalformedDrawError as e:
                contest = item.get("concurso") if isinstance(item, dict) else None
                logger.error(f"유효하지 않은 회차 데이터 (위치: {position}, 회차: {contest}): {e}")
                raise

        self.draws = draws
        logger.info(f"역대 데이터 {len(self.draws)}개 로드 성공")
        return self.draws

    def get_last_draw(self) -> Optional[Draw]:
        """마지막 회차 데이터 반환"""
        if not self.draws:
            return None
        return self.draws[-1]

    def get_all_draws(self) -> List[Draw]:
        """모든 당첨 데이터 반환"""
        return self.draws
