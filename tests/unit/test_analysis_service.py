# tests/unit/test_analysis_service.py
import pytest

from models.draw import Draw
from services.analysis_service import AnalysisService, analyze_history, find_consecutive_triples
from utils.exceptions import DegenerateHistoryError, MalformedDrawError


class TestFindConsecutiveTriples:
    """연속 번호 3개 탐지 테스트"""

    def test_finds_all_triples_in_runs(self):
        assert find_consecutive_triples([1, 2, 3, 5, 6, 7]) == [(1, 2, 3), (5, 6, 7)]

    def test_overlapping_triples_in_long_run(self):
        assert find_consecutive_triples([4, 5, 6, 7]) == [(4, 5, 6), (5, 6, 7)]

    def test_unsorted_input_is_sorted_first(self):
        """값 기준 인접성이므로 정렬 후 탐지"""
        assert find_consecutive_triples([3, 10, 1, 2]) == [(1, 2, 3)]

    def test_no_triples(self):
        assert find_consecutive_triples([1, 3, 5, 7, 9]) == []


class TestAnalyzeHistory:
    """과거 이력 분석 테스트"""

    def test_frequency_for_three_draws(self, three_draws):
        """세 회차 모두 나온 번호는 3, 첫 회차에만 나온 번호는 1"""
        metrics = analyze_history(three_draws)

        for n in range(11, 16):
            assert metrics.frequency[n] == 3
        assert metrics.frequency[1] == 1
        assert metrics.frequency[16] == 2
        assert metrics.frequency[25] == 1
        assert len(metrics.frequency) == 25

    def test_frequency_sum_invariant(self, sample_draws):
        metrics = analyze_history(sample_draws)

        assert sum(metrics.frequency.values()) == 15 * len(sample_draws)

    def test_delay_for_three_draws(self, three_draws):
        """최근 회차에 나온 번호는 0, 마지막 출현 이후 회차 수만큼 증가"""
        metrics = analyze_history(three_draws)

        assert metrics.delay[1] == 2
        for n in range(2, 11):
            assert metrics.delay[n] == 1
        assert metrics.delay[16] == 0
        for n in range(11, 26):
            assert metrics.delay[n] == 0

    def test_delay_for_never_seen_number_equals_total(self, three_draws):
        metrics = analyze_history(three_draws[:1])

        # 첫 회차 {1..15}만 있으면 16-25는 한 번도 나오지 않음
        for n in range(16, 26):
            assert metrics.delay[n] == 1
        for n in range(1, 16):
            assert metrics.delay[n] == 0

    def test_sequences_sorted_by_frequency_with_stable_ties(self, three_draws):
        """빈도 내림차순, 동률은 처음 발견된 순서"""
        metrics = analyze_history(three_draws)

        starts = [seq.numbers[0] for seq in metrics.sequences]
        counts = [seq.frequency for seq in metrics.sequences]

        assert len(metrics.sequences) == 10
        assert starts == [11, 12, 13, 2, 3, 4, 5, 6, 7, 8]
        assert counts == [3, 3, 3, 2, 2, 2, 2, 2, 2, 2]
        assert metrics.sequences[0].numbers == (11, 12, 13)

    def test_even_odd_combinations(self, three_draws):
        metrics = analyze_history(three_draws)

        combos = [(c.evens, c.odds, c.frequency) for c in metrics.even_odd_combinations]
        assert combos == [(7, 8, 2), (8, 7, 1)]
        assert metrics.ideal_parity.label == "7p-8i"

    def test_total_draws(self, three_draws):
        assert analyze_history(three_draws).total_draws == 3

    def test_empty_history_raises_degenerate_error(self):
        """빈 이력은 0으로 나누기 대신 DegenerateHistoryError"""
        with pytest.raises(DegenerateHistoryError):
            analyze_history([])

    def test_metrics_are_read_only(self, three_draws):
        metrics = analyze_history(three_draws)

        with pytest.raises(TypeError):
            metrics.frequency[1] = 100
        with pytest.raises(AttributeError):
            metrics.total_draws = 0

    def test_raw_and_string_draws_are_normalized(self, three_draws):
        """번호 목록과 문자열 번호도 Draw와 같은 결과"""
        raw = [
            [f"{n:02d}" for n in range(1, 16)],
            list(range(2, 17)),
            Draw(numbers=tuple(str(n) for n in range(25, 10, -1))),
        ]

        assert analyze_history(raw) == analyze_history(three_draws)

    def test_malformed_raw_draw_is_not_wrapped(self):
        """형식 오류는 AnalysisError로 감싸지 않고 MalformedDrawError 그대로"""
        with pytest.raises(MalformedDrawError):
            analyze_history([list(range(1, 16)), ["x"] + list(range(2, 16))])

        with pytest.raises(MalformedDrawError):
            analyze_history([list(range(1, 15))])


class TestAnalysisService:
    """AnalysisService 테스트"""

    def test_metrics_are_cached(self, sample_draws):
        service = AnalysisService(sample_draws)

        assert service.get_metrics() is service.get_metrics()

    def test_hot_and_cold_numbers(self, three_draws):
        service = AnalysisService(three_draws)

        assert service.get_hot_numbers(5) == [11, 12, 13, 14, 15]
        assert service.get_cold_numbers(1) == [1]
