from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from config.settings import DEFAULT_BATCH_COUNT, MIN_GAME_SIZE, MAX_GAME_SIZE
from utils.validators import LotofacilValidator


class RecommendationRequest(BaseModel):
    """추천 요청 모델"""
    size: int = Field(15, description="게임 번호 개수 (15-20)")
    batch_count: int = Field(DEFAULT_BATCH_COUNT, description="생성할 후보 게임 개수")

    @field_validator("size")
    @classmethod
    def validate_size(cls, v):
        if v < MIN_GAME_SIZE or v > MAX_GAME_SIZE:
            raise ValueError(f"게임 번호 개수는 {MIN_GAME_SIZE}~{MAX_GAME_SIZE} 사이여야 합니다")
        return v

    @field_validator("batch_count")
    @classmethod
    def validate_batch_count(cls, v):
        if v < 1 or v > 100:
            raise ValueError("후보 게임 개수는 1~100 사이여야 합니다")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "size": 15,
                "batch_count": 10
            }
        }
    }


class EvaluationRequest(BaseModel):
    """게임 평가 요청 모델"""
    numbers: List[int] = Field(..., description="평가할 번호 (15-20개)")

    @field_validator("numbers")
    @classmethod
    def validate_numbers(cls, v):
        if not LotofacilValidator.validate_numbers(v):
            raise ValueError(
                f"번호는 1~25 사이의 서로 다른 {MIN_GAME_SIZE}~{MAX_GAME_SIZE}개여야 합니다"
            )
        return v


class GameAnalysisResult(BaseModel):
    """게임 분석 결과"""
    game: List[int] = Field(..., description="번호 (오름차순)")
    evens: int = Field(..., description="짝수 개수")
    odds: int = Field(..., description="홀수 개수")
    ranges: Dict[str, int] = Field(..., description="구간별 번호 개수")
    sequence_count: int = Field(..., description="포함된 상위 연속 번호 개수")
    avg_score: float = Field(..., description="평균 점수")
    hot_numbers: int = Field(..., description="핫 번호 개수")
    cold_numbers: int = Field(..., description="콜드 번호 개수")


class RecommendationResponse(BaseModel):
    """추천 응답 모델"""
    recommendation: GameAnalysisResult = Field(..., description="최고 점수 게임")
    total_draws: int = Field(..., description="분석한 회차 수")
    last_contest: Optional[int] = Field(None, description="최근 회차 번호")
    elapsed_time: float = Field(..., description="총 소요 시간(초)")


class SequenceResult(BaseModel):
    sequence: List[int]
    frequency: int


class ParityResult(BaseModel):
    evens: int
    odds: int
    frequency: int


class MetricsResponse(BaseModel):
    """이력 통계 응답 모델"""
    total_draws: int = Field(..., description="분석한 회차 수")
    frequency: Dict[int, int] = Field(..., description="번호별 출현 횟수")
    delay: Dict[int, int] = Field(..., description="번호별 미출현 회차 수")
    sequences: List[SequenceResult] = Field(..., description="상위 연속 번호")
    even_odd_combinations: List[ParityResult] = Field(..., description="짝홀 조합 분포")
