# api/routers/recommendation.py
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_async_data_service
from api.schemas.recommendation import (
    EvaluationRequest, GameAnalysisResult, MetricsResponse,
    RecommendationRequest, RecommendationResponse
)
from models.metrics import HistoricalMetrics
from services.analysis_service import analyze_history
from services.data_service import AsyncDataService
from services.game_evaluator import evaluate_game
from services.selection_service import SelectionService
from utils.exceptions import (
    AnalysisError, DataLoadError, DegenerateHistoryError, InvalidSizeError,
    MalformedDrawError, ValidationError
)

router = APIRouter()
logger = logging.getLogger("lotofacil")


async def _load_metrics(data_service: AsyncDataService) -> HistoricalMetrics:
    """역대 데이터 로드 후 분석"""
    try:
        draws = await data_service.load_historical_data()
    except DataLoadError as e:
        logger.error(f"데이터 로드 오류: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="당첨 결과 데이터를 가져올 수 없습니다. 잠시 후 다시 시도해주세요."
        )
    except MalformedDrawError as e:
        logger.error(f"당첨 결과 형식 오류: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"당첨 결과 데이터 형식이 올바르지 않습니다: {e.message}"
        )

    try:
        return analyze_history(draws)
    except DegenerateHistoryError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except AnalysisError as e:
        logger.error(f"데이터 분석 오류: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="데이터 분석에 실패했습니다"
        )


@router.get("/metrics", response_model=MetricsResponse, status_code=status.HTTP_200_OK)
async def get_metrics(data_service: AsyncDataService = Depends(get_async_data_service)):
    """과거 당첨 이력 통계 조회"""
    metrics = await _load_metrics(data_service)
    return metrics.to_dict()


@router.post("/recommendation", response_model=RecommendationResponse, status_code=status.HTTP_200_OK)
async def recommend_game(
        request: RecommendationRequest,
        data_service: AsyncDataService = Depends(get_async_data_service)
):
    """
    추천 게임 생성 - 데이터 수집, 분석, 후보 생성, 최고 점수 게임 선택까지 한번에 처리
    """
    start_time = time.time()
    logger.info(f"추천 프로세스 시작 (크기: {request.size}, 후보: {request.batch_count})")

    metrics = await _load_metrics(data_service)

    try:
        selection_service = SelectionService(metrics)
        best = await selection_service.pick_best_async(request.size, request.batch_count)
    except (InvalidSizeError, ValidationError, DegenerateHistoryError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)

    last_draw = data_service.get_last_draw()
    elapsed_time = time.time() - start_time
    logger.info(f"추천 프로세스 완료: {list(best.game)} (소요 시간: {elapsed_time:.2f}초)")

    return RecommendationResponse(
        recommendation=GameAnalysisResult(**best.to_dict()),
        total_draws=metrics.total_draws,
        last_contest=last_draw.contest if last_draw else None,
        elapsed_time=elapsed_time
    )


@router.post("/evaluation", response_model=GameAnalysisResult, status_code=status.HTTP_200_OK)
async def evaluate_numbers(
        request: EvaluationRequest,
        data_service: AsyncDataService = Depends(get_async_data_service)
):
    """사용자가 고른 번호를 과거 이력 기준으로 평가"""
    metrics = await _load_metrics(data_service)

    try:
        analysis = evaluate_game(request.numbers, metrics)
    except (DegenerateHistoryError, ValidationError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)

    return GameAnalysisResult(**analysis.to_dict())
