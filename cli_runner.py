#!/usr/bin/env python3
# cli_runner.py - CLI 실행 스크립트
import sys
from config.logging_config import setup_logging
from config.settings import verify_settings
from cli.commands import CLI
from utils.exceptions import LotofacilError


def main(argv=None):
    """CLI 인터페이스 실행을 위한 진입점"""
    # 로깅 설정
    logger = setup_logging()
    logger.info("로또파실 추천 시스템 CLI 시작")

    exit_code = 0
    try:
        verify_settings()
        cli = CLI()
        cli.run(argv)
    except KeyboardInterrupt:
        logger.info("사용자에 의해 종료됨")
    except LotofacilError as e:
        logger.error(f"처리 실패: {e.message}")
        print(f"오류: {e.message}")
        exit_code = 1
    except Exception as e:
        logger.exception(f"예상치 못한 오류 발생: {e}")
        exit_code = 1
    finally:
        logger.info("로또파실 추천 시스템 CLI 종료")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
