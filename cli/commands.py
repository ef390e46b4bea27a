# cli/commands.py
import argparse
import asyncio
import logging
from datetime import datetime
from config.settings import DEFAULT_BATCH_COUNT, MIN_GAME_SIZE, MAX_GAME_SIZE
from services.analysis_service import analyze_history
from services.data_service import AsyncDataService
from services.selection_service import SelectionService
from utils.formatters import ResultFormatter
from utils.validators import LotofacilValidator

logger = logging.getLogger("lotofacil")


class CLI:
    """로또파실 추천 시스템 CLI"""

    def __init__(self, data_service=None, input_func=input):
        self.data_service = data_service or AsyncDataService()
        self.input_func = input_func
        self.parser = self._create_parser()

    def _create_parser(self):
        """명령줄 파서 생성"""
        parser = argparse.ArgumentParser(
            description="로또파실 번호 추천 시스템"
        )

        subparsers = parser.add_subparsers(dest="command", help="명령")

        # 추천 명령
        recommend_parser = subparsers.add_parser("recommend", help="추천 게임 생성")
        recommend_parser.add_argument(
            "--size", type=int, default=None,
            help=f"게임 번호 개수 ({MIN_GAME_SIZE}-{MAX_GAME_SIZE}, 생략 시 입력 요청)"
        )
        recommend_parser.add_argument(
            "--batch", type=int, default=DEFAULT_BATCH_COUNT,
            help=f"후보 게임 개수 (기본값: {DEFAULT_BATCH_COUNT})"
        )
        recommend_parser.add_argument(
            "--output", choices=["text", "json"], default="text",
            help="출력 형식 (기본값: text)"
        )
        recommend_parser.add_argument(
            "--save", action="store_true",
            help="결과를 파일로 저장"
        )
        recommend_parser.add_argument(
            "--local", action="store_true",
            help="원격 API 대신 로컬 데이터만 사용"
        )

        # 분석 명령
        analyze_parser = subparsers.add_parser("analyze", help="과거 당첨 이력 분석")
        analyze_parser.add_argument(
            "--output", choices=["text", "json"], default="text",
            help="출력 형식 (기본값: text)"
        )
        analyze_parser.add_argument(
            "--local", action="store_true",
            help="원격 API 대신 로컬 데이터만 사용"
        )

        return parser

    def run(self, argv=None):
        """CLI 실행"""
        args = self.parser.parse_args(argv)

        if not args.command:
            self.parser.print_help()
            return

        if args.command == "recommend":
            self._handle_recommend(args)
        elif args.command == "analyze":
            self._handle_analyze(args)

    def ask_game_size(self) -> int:
        """유효한 값이 입력될 때까지 게임 크기 입력 요청"""
        while True:
            answer = self.input_func(f"게임 번호 개수를 입력하세요 ({MIN_GAME_SIZE}-{MAX_GAME_SIZE}): ")
            size = LotofacilValidator.parse_game_size(answer)
            if size is not None:
                return size
            print(f"{MIN_GAME_SIZE}에서 {MAX_GAME_SIZE} 사이의 숫자를 입력하세요.")

    def _load_metrics(self, args):
        draws = asyncio.run(self.data_service.load_historical_data(use_remote=not args.local))
        return analyze_history(draws)

    def _handle_recommend(self, args):
        """추천 명령 처리"""
        metrics = self._load_metrics(args)

        size = args.size if args.size is not None else self.ask_game_size()
        logger.info(f"추천 게임 생성 중 (크기: {size}, 후보: {args.batch})")

        best = SelectionService(metrics).pick_best(size, args.batch)

        # 결과 출력
        if args.output == "text":
            result = ResultFormatter.format_analysis_to_text(best)
        else:
            result = ResultFormatter.format_analysis_to_json(best)

        print(result)

        # 결과 저장
        if args.save:
            filename = f"recommendation_{size}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            filename += ".json" if args.output == "json" else ".txt"
            with open(filename, "w", encoding="utf-8") as f:
                f.write(result)

            print(f"추천 결과가 저장되었습니다: {filename}")

    def _handle_analyze(self, args):
        """분석 명령 처리"""
        metrics = self._load_metrics(args)

        if args.output == "text":
            print(ResultFormatter.format_metrics_to_text(metrics))
        else:
            print(ResultFormatter.format_metrics_to_json(metrics))
