# utils/validators.py
from typing import Any, List, Optional
import logging

from config.settings import MIN_NUMBER, MAX_NUMBER, MIN_GAME_SIZE, MAX_GAME_SIZE

logger = logging.getLogger("lotofacil")


class LotofacilValidator:
    """로또파실 번호 유효성 검증 유틸리티"""

    @staticmethod
    def validate_numbers(numbers: List[int], min_num: int = MIN_NUMBER, max_num: int = MAX_NUMBER,
                         count: Optional[int] = None) -> bool:
        """번호 목록 유효성 검사 (count가 None이면 15-20개 허용)"""
        if not isinstance(numbers, (list, tuple)):
            logger.error(f"유효하지 않은 번호 형식: {type(numbers)}")
            return False

        if count is not None and len(numbers) != count:
            logger.error(f"번호 개수 불일치: 예상 {count}, 실제 {len(numbers)}")
            return False

        if count is None and not MIN_GAME_SIZE <= len(numbers) <= MAX_GAME_SIZE:
            logger.error(f"번호 개수가 허용 범위({MIN_GAME_SIZE}-{MAX_GAME_SIZE})를 벗어남: {len(numbers)}")
            return False

        if len(set(numbers)) != len(numbers):
            logger.error("중복 번호 발견")
            return False

        if not all(min_num <= num <= max_num for num in numbers):
            logger.error(f"범위를 벗어난 번호 발견 (유효 범위: {min_num}-{max_num})")
            return False

        return True

    @staticmethod
    def parse_game_size(value: Any) -> Optional[int]:
        """사용자 입력을 게임 크기로 변환, 유효하지 않으면 None"""
        try:
            size = int(str(value).strip())
        except (TypeError, ValueError):
            return None

        if not MIN_GAME_SIZE <= size <= MAX_GAME_SIZE:
            return None
        return size
