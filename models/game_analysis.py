# models/game_analysis.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple
import json


@dataclass(frozen=True)
class GameAnalysis:
    """생성된 게임과 그 통계"""
    game: Tuple[int, ...]
    evens: int
    odds: int
    ranges: Mapping[str, int]
    sequence_count: int
    avg_score: float
    hot_numbers: int
    cold_numbers: int

    def __post_init__(self):
        object.__setattr__(self, "game", tuple(self.game))
        object.__setattr__(self, "ranges", MappingProxyType(dict(self.ranges)))

    @property
    def size(self) -> int:
        return len(self.game)

    def to_dict(self):
        """딕셔너리로 변환"""
        return {
            "game": list(self.game),
            "evens": self.evens,
            "odds": self.odds,
            "ranges": dict(self.ranges),
            "sequence_count": self.sequence_count,
            "avg_score": self.avg_score,
            "hot_numbers": self.hot_numbers,
            "cold_numbers": self.cold_numbers
        }

    def to_json(self):
        """JSON 문자열로 변환"""
        return json.dumps(self.to_dict())
