# api/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging
from config.settings import verify_settings

from api.routers import recommendation

# 로깅 설정
logger = logging.getLogger("lotofacil")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 라이프스팬 컨텍스트 매니저
    - 시작 시 설정 검증
    - 종료 시 로그 기록
    """
    logger.info("애플리케이션 시작 중...")

    verify_settings()

    logger.info("애플리케이션 초기화 완료")

    yield  # FastAPI 애플리케이션 실행

    logger.info("애플리케이션 종료")


# FastAPI 앱 생성 (lifespan 컨텍스트 매니저 적용)
app = FastAPI(
    title="Lotofacil Recommendation API",
    description="로또파실 번호 추천 시스템 API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션 환경에서는 특정 도메인으로 제한하세요
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(recommendation.router, prefix="/api", tags=["recommendation"])


@app.get("/", tags=["root"])
async def root():
    """API 루트 엔드포인트"""
    return {
        "message": "로또파실 추천 시스템 API에 오신 것을 환영합니다!",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
