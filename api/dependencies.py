# api/dependencies.py
import logging

from fastapi import Depends

from services.data_service import AsyncDataService
from services.results_service import ResultsService

logger = logging.getLogger("lotofacil")


def get_results_service():
    """당첨 결과 조회 서비스 의존성"""
    return ResultsService()


def get_async_data_service(
        results_service: ResultsService = Depends(get_results_service)
):
    """비동기 DataService 의존성"""
    return AsyncDataService(results_service=results_service)
