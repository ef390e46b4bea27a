# services/results_service.py
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from config.settings import RESULTS_API_URL, RESULTS_API_TIMEOUT, LOCAL_RESULTS_PATH
from utils.exceptions import DataLoadError

logger = logging.getLogger("lotofacil")


class ResultsService:
    """로또파실 당첨 결과 조회 서비스

    원격 API 조회에 실패하면 로컬 JSON 파일을 사용합니다.
    둘 다 실패하면 빈 목록 대신 DataLoadError를 발생시킵니다.
    """

    def __init__(self, api_url: str = RESULTS_API_URL, local_path: str = LOCAL_RESULTS_PATH,
                 timeout: float = RESULTS_API_TIMEOUT):
        self.api_url = api_url
        self.local_path = local_path
        self.timeout = timeout

    async def fetch_remote_results(self) -> Optional[List[Dict[str, Any]]]:
        """결과 API에서 전체 회차 조회"""
        try:
            logger.info(f"당첨 결과 조회 요청 중: {self.api_url}")

            headers = {"Accept": "application/json"}
            timeout = aiohttp.ClientTimeout(total=self.timeout)

            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.api_url, headers=headers) as response:
                    if response.status != 200:
                        logger.error(f"당첨 결과 조회 실패 (HTTP {response.status})")
                        return None

                    text = await response.text()

            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                logger.error(f"당첨 결과 JSON 파싱 실패: {e}")
                return None

            if not isinstance(data, list):
                logger.error(f"예상하지 못한 응답 형식: {type(data).__name__}")
                return None

            logger.info(f"당첨 결과 {len(data)}개 회차 조회 성공")
            return data

        except aiohttp.ClientError as e:
            logger.error(f"당첨 결과 API 요청 중 네트워크 오류: {e}")
            return None
        except asyncio.TimeoutError:
            logger.error("당첨 결과 API 요청 타임아웃")
            return None
        except Exception as e:
            logger.exception(f"당첨 결과 조회 중 예상치 못한 오류: {e}")
            return None

    def load_local_results(self, path: Optional[str] = None) -> List[Dict[str, Any]]:
        """로컬 JSON 파일에서 당첨 결과 로드"""
        path = path or self.local_path
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"로컬 당첨 결과 파일이 없습니다: {path}")
            raise DataLoadError(f"로컬 당첨 결과 파일이 없습니다: {path}", original_error=e)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"로컬 당첨 결과 파일 읽기 오류 ({path}): {e}")
            raise DataLoadError(f"로컬 당첨 결과 파일을 읽을 수 없습니다: {path}", original_error=e)

        if not isinstance(data, list):
            raise DataLoadError(f"로컬 당첨 결과 파일 형식이 올바르지 않습니다: {path}")

        logger.info(f"로컬 당첨 결과 {len(data)}개 회차 로드 ({path})")
        return data

    async def fetch_results(self, use_remote: bool = True) -> List[Dict[str, Any]]:
        """원격 조회 후 실패 시 로컬 데이터로 대체"""
        if use_remote:
            data = await self.fetch_remote_results()
            if data:
                return data
            logger.warning("원격 조회 실패, 로컬 데이터를 사용합니다")

        data = self.load_local_results()
        if not data:
            raise DataLoadError("사용할 수 있는 당첨 결과가 없습니다")
        return data
