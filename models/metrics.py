# models/metrics.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class SequenceStat:
    """같은 회차에 함께 나온 연속 번호 3개와 그 출현 횟수"""
    numbers: Tuple[int, int, int]
    frequency: int

    def to_dict(self):
        return {"sequence": list(self.numbers), "frequency": self.frequency}


@dataclass(frozen=True)
class ParityCombination:
    """회차별 짝수/홀수 개수 조합과 그 출현 횟수"""
    evens: int
    odds: int
    frequency: int

    @property
    def label(self) -> str:
        return f"{self.evens}p-{self.odds}i"

    def to_dict(self):
        return {"evens": self.evens, "odds": self.odds, "frequency": self.frequency}


@dataclass(frozen=True)
class HistoricalMetrics:
    """과거 당첨 이력에서 계산된 읽기 전용 통계"""
    frequency: Mapping[int, int]
    delay: Mapping[int, int]
    sequences: Tuple[SequenceStat, ...]
    even_odd_combinations: Tuple[ParityCombination, ...]
    total_draws: int

    def __post_init__(self):
        # 생성 후 변경 불가
        object.__setattr__(self, "frequency", MappingProxyType(dict(self.frequency)))
        object.__setattr__(self, "delay", MappingProxyType(dict(self.delay)))
        object.__setattr__(self, "sequences", tuple(self.sequences))
        object.__setattr__(self, "even_odd_combinations", tuple(self.even_odd_combinations))

    @property
    def ideal_parity(self) -> ParityCombination:
        """가장 많이 나온 짝홀 조합"""
        return self.even_odd_combinations[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_draws": self.total_draws,
            "frequency": dict(self.frequency),
            "delay": dict(self.delay),
            "sequences": [s.to_dict() for s in self.sequences],
            "even_odd_combinations": [c.to_dict() for c in self.even_odd_combinations]
        }
