# models/draw.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple
from config.settings import MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW
from utils.exceptions import MalformedDrawError
import logging

logger = logging.getLogger("lotofacil")


@dataclass(frozen=True)
class Draw:
    """로또파실 당첨 번호 모델 (15개, 오름차순 튜플)

    직접 생성해도 번호는 정수로 정규화되고 검증된다.
    """
    numbers: Tuple[int, ...]
    contest: Optional[int] = None
    draw_date: Optional[datetime] = None

    def __post_init__(self):
        contest = self.contest
        try:
            numbers = [int(str(n).strip()) for n in self.numbers]
        except (TypeError, ValueError) as e:
            logger.error(f"번호 변환 실패 (회차: {contest}): {e}")
            raise MalformedDrawError(f"정수로 변환할 수 없는 번호가 있습니다: {self.numbers!r}", original_error=e)

        if len(numbers) != NUMBERS_PER_DRAW:
            raise MalformedDrawError(
                f"번호 개수 불일치 (회차: {contest}): 예상 {NUMBERS_PER_DRAW}, 실제 {len(numbers)}"
            )

        if len(set(numbers)) != NUMBERS_PER_DRAW:
            raise MalformedDrawError(f"중복된 번호가 있습니다 (회차: {contest}): {numbers}")

        out_of_range = [n for n in numbers if n < MIN_NUMBER or n > MAX_NUMBER]
        if out_of_range:
            raise MalformedDrawError(
                f"유효 범위({MIN_NUMBER}-{MAX_NUMBER})를 벗어난 번호 (회차: {contest}): {out_of_range}"
            )

        object.__setattr__(self, "numbers", tuple(sorted(numbers)))

    @classmethod
    def from_raw(cls, raw_numbers: Iterable[Any], contest: Optional[int] = None,
                 draw_date: Optional[datetime] = None):
        """문자열/정수 번호 목록에서 Draw 생성

        외부 수집기는 "01", "02" 같은 문자열을 넘기기도 하므로 정수로 정규화한다.
        """
        if isinstance(raw_numbers, (str, bytes)):
            raise MalformedDrawError(f"번호 목록이 아닌 값입니다 (회차: {contest}): {raw_numbers!r}")
        try:
            numbers = tuple(raw_numbers)
        except TypeError as e:
            raise MalformedDrawError(f"번호 목록이 아닌 값입니다 (회차: {contest}): {raw_numbers!r}", original_error=e)

        return cls(numbers=numbers, contest=contest, draw_date=draw_date)

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]):
        """결과 API 항목({"concurso": ..., "data": ..., "dezenas": [...]})에서 Draw 생성"""
        if not isinstance(item, dict) or "dezenas" not in item:
            raise MalformedDrawError(f"dezenas 필드가 없는 결과 항목입니다: {item!r}")

        contest = item.get("concurso")
        if contest is not None:
            try:
                contest = int(contest)
            except (TypeError, ValueError):
                logger.warning(f"회차 번호 변환 실패, 무시합니다: {contest}")
                contest = None

        draw_date = None
        if item.get("data"):
            try:
                draw_date = datetime.strptime(item["data"], "%d/%m/%Y")
            except (TypeError, ValueError):
                logger.warning(f"날짜 변환 실패 (회차: {contest}): {item['data']}")

        return cls.from_raw(item["dezenas"], contest=contest, draw_date=draw_date)

    @property
    def evens(self) -> int:
        return sum(1 for n in self.numbers if n % 2 == 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contest": self.contest,
            "numbers": list(self.numbers),
            "draw_date": self.draw_date.strftime("%Y-%m-%d") if self.draw_date else None
        }
