#!/usr/bin/env python3
# api_server.py - API 서버 실행 스크립트
import os
import uvicorn
from config.logging_config import setup_logging


def main():
    """API 서버 실행을 위한 진입점"""
    # 로깅 설정
    logger = setup_logging()
    logger.info("로또파실 추천 시스템 API 서버 시작")

    # FastAPI 애플리케이션 실행
    uvicorn.run(
        "api.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
        log_level="info"
    )


if __name__ == "__main__":
    main()
