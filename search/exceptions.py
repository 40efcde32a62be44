class SearchServiceError(Exception):
    pass


class EngineError(SearchServiceError):
    """검색 엔진 통신/응답 실패. 메시지는 엔진 에러 텍스트를 그대로 담는다."""


class DecodeError(EngineError):
    """hit `_source`를 Document로 복원하지 못함."""


class StartupError(SearchServiceError):
    """설정 로드 또는 최초 엔진 연결 실패 (서빙 시작 불가)."""
