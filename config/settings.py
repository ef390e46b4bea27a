# config/settings.py
import os
from dotenv import load_dotenv
import logging
from utils.exceptions import ConfigurationError

# .env 파일 로드
load_dotenv()

logger = logging.getLogger("lotofacil")

# 숫자로 변환하지 못한 환경 변수 (verify_settings에서 보고)
INVALID_ENV_VALUES = {}


def _get_env_number(name, default, cast):
    """숫자 환경 변수 읽기, 변환 실패 시 기본값을 쓰고 기록"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"{name} 값을 숫자로 변환할 수 없어 기본값 {default}을 사용합니다: {raw!r}")
        INVALID_ENV_VALUES[name] = raw
        return default


# 로또파실 설정
MIN_NUMBER = 1
MAX_NUMBER = 25
NUMBERS_PER_DRAW = 15
MIN_GAME_SIZE = 15
MAX_GAME_SIZE = 20

# 점수 가중치
FREQUENCY_WEIGHT = 0.6
DELAY_WEIGHT = 0.4

# 분석 설정
TOP_SEQUENCES = 10
SEED_SEQUENCE_POOL = 3  # 시드로 사용할 상위 연속 번호 개수
HOT_FREQUENCY_THRESHOLD = 35
COLD_DELAY_THRESHOLD = 10

# 번호 구간 (5개 단위)
NUMBER_RANGES = {
    "1-5": (1, 5),
    "6-10": (6, 10),
    "11-15": (11, 15),
    "16-20": (16, 20),
    "21-25": (21, 25),
}

# 선택 설정
DEFAULT_BATCH_COUNT = _get_env_number("BATCH_COUNT", 10, int)

# 당첨 결과 수집 설정
RESULTS_API_URL = os.getenv("RESULTS_API_URL", "https://loteriascaixa-api.herokuapp.com/api/lotofacil")
RESULTS_API_TIMEOUT = _get_env_number("RESULTS_API_TIMEOUT", 30.0, float)  # 초 단위
LOCAL_RESULTS_PATH = os.getenv("LOCAL_RESULTS_PATH", "data/lotofacil.json")
# API는 최신 회차부터 반환함
RESULTS_NEWEST_FIRST = os.getenv("RESULTS_NEWEST_FIRST", "true").lower() == "true"

# 로그 설정
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_range_label(number: int) -> str:
    """번호가 속한 구간 라벨 반환"""
    for label, (low, high) in NUMBER_RANGES.items():
        if low <= number <= high:
            return label
    raise ValueError(f"범위를 벗어난 번호: {number}")


def verify_settings():
    """설정값 검증"""
    if INVALID_ENV_VALUES:
        error_msg = f"숫자가 아닌 환경 변수 값: {INVALID_ENV_VALUES}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if DEFAULT_BATCH_COUNT < 1:
        error_msg = f"BATCH_COUNT는 1 이상이어야 합니다: {DEFAULT_BATCH_COUNT}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if RESULTS_API_TIMEOUT <= 0:
        error_msg = f"RESULTS_API_TIMEOUT은 0보다 커야 합니다: {RESULTS_API_TIMEOUT}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        error_msg = f"알 수 없는 LOG_LEVEL: {LOG_LEVEL}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    logger.info("설정 검증 완료")
