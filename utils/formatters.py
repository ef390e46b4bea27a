import json
from typing import List
from models.game_analysis import GameAnalysis
from models.metrics import HistoricalMetrics


class ResultFormatter:
    """결과 포맷팅 유틸리티"""

    @staticmethod
    def format_analysis_to_json(analysis: GameAnalysis, pretty: bool = True) -> str:
        """게임 분석 결과를 JSON 문자열로 변환"""
        if pretty:
            return json.dumps(analysis.to_dict(), indent=2)
        else:
            return json.dumps(analysis.to_dict())

    @staticmethod
    def format_analysis_to_text(analysis: GameAnalysis) -> str:
        """추천 게임과 통계를 텍스트로 변환"""
        ranges_str = ", ".join(f"{label}: {count}" for label, count in analysis.ranges.items())

        lines = [
            f"추천 게임 ({analysis.size}개 번호):",
            ", ".join(str(n) for n in analysis.game),
            "",
            "통계:",
            f"- 짝수: {analysis.evens}",
            f"- 홀수: {analysis.odds}",
            f"- 구간: {ranges_str}",
            f"- 연속 번호: {analysis.sequence_count}",
            f"- 핫 번호: {analysis.hot_numbers}",
            f"- 콜드 번호: {analysis.cold_numbers}",
            f"- 평균 점수: {analysis.avg_score:.4f}",
        ]
        return "\n".join(lines)

    @staticmethod
    def format_metrics_to_json(metrics: HistoricalMetrics, pretty: bool = True) -> str:
        """이력 통계를 JSON 문자열로 변환"""
        return json.dumps(metrics.to_dict(), indent=2 if pretty else None)

    @staticmethod
    def format_metrics_to_text(metrics: HistoricalMetrics, top: int = 10) -> str:
        """이력 통계를 텍스트로 변환"""
        if not metrics.total_draws:
            return "데이터가 없습니다."

        frequency = metrics.frequency
        delay = metrics.delay
        by_frequency: List[int] = sorted(frequency, key=lambda n: (-frequency[n], n))[:top]
        by_delay: List[int] = sorted(delay, key=lambda n: (-delay[n], n))[:top]

        lines = [f"분석 회차 수: {metrics.total_draws}", "", "출현 빈도 상위 번호:"]
        lines.extend(f"  {n:2d}: {frequency[n]}회" for n in by_frequency)

        lines.append("")
        lines.append("미출현 기간 상위 번호:")
        lines.extend(f"  {n:2d}: {delay[n]}회차" for n in by_delay)

        lines.append("")
        lines.append("자주 나온 연속 번호:")
        for seq in metrics.sequences:
            lines.append(f"  [{', '.join(map(str, seq.numbers))}] {seq.frequency}회")

        lines.append("")
        lines.append("짝홀 조합:")
        for combo in metrics.even_odd_combinations:
            lines.append(f"  {combo.label} {combo.frequency}회")

        return "\n".join(lines)
