"""GameGenerator 단위 테스트

크기 검증, 점수 순위, 짝홀/구간 제약, 제약 완화 동작을 검증합니다.
"""

import pytest

from conftest import build_metrics
from services.analysis_service import analyze_history
from services.game_generator import GameGenerator, generate_game, rank_numbers, validate_game_size
from utils.exceptions import DegenerateHistoryError, InvalidSizeError


def pick_first(sequences):
    return sequences[0]


@pytest.fixture
def linear_metrics():
    """번호가 클수록 점수가 높은 통계 (짝 2 : 홀 13 이 가장 흔한 조합)"""
    return build_metrics(
        frequency={n: n for n in range(1, 26)},
        delay={n: 1 for n in range(1, 26)},
        sequences=[((1, 2, 3), 1)],
        parity=[(2, 13, 1)]
    )


class TestSizeValidation:
    """게임 크기 검증 테스트"""

    @pytest.mark.parametrize("size", [14, 21, 0, -15])
    def test_rejects_out_of_range_size(self, sample_draws, size):
        metrics = analyze_history(sample_draws)

        with pytest.raises(InvalidSizeError) as exc_info:
            generate_game(metrics, size)

        assert "must be between 15 and 20" in str(exc_info.value)

    @pytest.mark.parametrize("size", ["15", 15.0, True, None])
    def test_rejects_non_integer_size(self, size):
        with pytest.raises(InvalidSizeError):
            validate_game_size(size)

    @pytest.mark.parametrize("size", range(15, 21))
    def test_accepts_valid_sizes(self, size):
        assert validate_game_size(size) == size


class TestRanking:
    """점수 순위 테스트"""

    def test_ties_broken_by_ascending_number(self):
        assert rank_numbers({1: 0.5, 2: 0.5, 3: 0.9, 4: 0.1}) == [3, 1, 2, 4]

    def test_linear_scores_rank_descending(self, linear_metrics):
        generator = GameGenerator(linear_metrics, choice=pick_first)

        assert generator.ranked_numbers == list(range(25, 0, -1))


class TestGenerate:
    """게임 생성 테스트"""

    @pytest.mark.parametrize("size", range(15, 21))
    def test_generates_valid_game_for_every_size(self, sample_draws, size):
        metrics = analyze_history(sample_draws)

        game = generate_game(metrics, size)

        assert len(game) == size
        assert len(set(game)) == size
        assert all(1 <= n <= 25 for n in game)
        assert list(game) == sorted(game)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_seed_sequence_is_included(self, sample_draws, index):
        """선택된 시드 연속 번호는 항상 게임에 포함"""
        metrics = analyze_history(sample_draws)
        seed = metrics.sequences[index].numbers

        game = generate_game(metrics, 15, choice=lambda seqs: seqs[index])

        assert set(seed).issubset(game)

    def test_chooser_receives_top_three_sequences(self, sample_draws):
        metrics = analyze_history(sample_draws)
        received = []

        def recording_choice(sequences):
            received.append(tuple(sequences))
            return sequences[0]

        generate_game(metrics, 15, choice=recording_choice)

        assert received == [metrics.sequences[:3]]

    def test_deterministic_with_pinned_choice(self, sample_draws):
        metrics = analyze_history(sample_draws)

        first = generate_game(metrics, 17, choice=pick_first)
        second = generate_game(metrics, 17, choice=pick_first)

        assert first == second

    def test_without_sequences_starts_empty(self):
        metrics = build_metrics(
            frequency={n: n for n in range(1, 26)},
            delay={n: 1 for n in range(1, 26)},
            parity=[(8, 7, 1)]
        )

        game = generate_game(metrics, 15)

        assert len(game) == 15

    def test_missing_parity_statistics_raises(self):
        metrics = build_metrics(
            frequency={n: 1 for n in range(1, 26)},
            delay={n: 1 for n in range(1, 26)},
            parity=[]
        )

        with pytest.raises(DegenerateHistoryError):
            GameGenerator(metrics)


class TestConstraints:
    """짝홀/구간 제약 테스트"""

    def test_parity_caps_scale_with_size(self, linear_metrics):
        generator = GameGenerator(linear_metrics, choice=pick_first)

        assert generator.parity_caps(15) == (2, 13)
        assert generator.parity_caps(20) == (3, 18)
        assert generator.range_cap(15) == 3
        assert generator.range_cap(16) == 4

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_greedy_phase_respects_eight_evens_cap(self, sample_draws, index):
        """가장 흔한 조합이 짝 8 : 홀 7 이면 크기 15 게임의 짝수는 8개 이하"""
        base = analyze_history(sample_draws)
        metrics = build_metrics(
            frequency=base.frequency,
            delay=base.delay,
            sequences=[(s.numbers, s.frequency) for s in base.sequences],
            parity=[(8, 7, 10), (7, 8, 5)]
        )
        generator = GameGenerator(metrics, choice=lambda seqs: seqs[index])

        draft = generator.fill_with_constraints(generator.seed(), 15)

        assert draft.evens <= 8
        assert draft.odds <= 7
        assert all(count <= 3 for count in draft.range_count.values())

    def test_greedy_phase_exact_selection(self, linear_metrics):
        generator = GameGenerator(linear_metrics, choice=pick_first)

        draft = generator.fill_with_constraints(generator.seed(), 20)

        assert sorted(draft.numbers) == [1, 2, 3, 5, 7, 9, 11, 13, 15, 17, 19, 22, 23, 24, 25]
        assert draft.evens == 3
        assert draft.range_count["21-25"] == 4

    def test_relaxation_fills_remaining_by_score(self, linear_metrics):
        """제약 조건으로 부족한 자리는 상한을 무시하고 점수 순으로 채움"""
        game = generate_game(linear_metrics, 20, choice=pick_first)

        assert list(game) == [1, 2, 3, 5, 7, 9, 11, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24, 25]
        evens = sum(1 for n in game if n % 2 == 0)
        assert evens == 7
        assert evens > GameGenerator(linear_metrics).parity_caps(20)[0]
