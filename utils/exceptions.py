# utils/exceptions.py
class LotofacilError(Exception):
    """로또파실 추천 시스템의 기본 예외 클래스"""
    def __init__(self, message, original_error=None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

class DataLoadError(LotofacilError):
    """당첨 결과 데이터 로드 오류"""
    pass

class MalformedDrawError(LotofacilError):
    """15개의 고유한 1-25 번호가 아닌 당첨 결과"""
    pass

class DegenerateHistoryError(LotofacilError):
    """비어 있거나 정규화가 불가능한 과거 당첨 이력"""
    pass

class InvalidSizeError(LotofacilError):
    """허용 범위(15-20)를 벗어난 게임 크기"""
    pass

class AnalysisError(LotofacilError):
    """데이터 분석 오류"""
    pass

class ConfigurationError(LotofacilError):
    """설정 오류"""
    pass

class ValidationError(LotofacilError):
    """입력 데이터 유효성 검증 오류"""
    pass
