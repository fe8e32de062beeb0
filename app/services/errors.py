"""
서비스 계층 예외.

- StoreError: 저장소(DB) 실패. HTTP 계층에서 500 {"error": 원문 메시지}
- NotFound: mark_shown 대상 id 가 없음 (동시 삭제 등)
- GenerationError: 문제 생성 실패 (UpstreamUnavailable / MalformedResponse)
- QuestionUnavailable: 컨트롤러가 GenerationError 를 감싼 것. 500 {"message": ...}
"""


class StoreError(Exception):
    """저장소 읽기/쓰기 실패"""


class NotFound(StoreError):
    def __init__(self, question_id: int):
        super().__init__(f"question {question_id} not found")
        self.question_id = question_id


class GenerationError(Exception):
    """외부 생성 서비스 관련 실패의 공통 부모"""


class UpstreamUnavailable(GenerationError):
    """네트워크/타임아웃/비 2xx/키 미설정"""


class MalformedResponse(GenerationError):
    """응답에서 구조화된 문제를 파싱하지 못함"""


class QuestionUnavailable(Exception):
    message = "could not produce question"

    def __init__(self, cause: GenerationError | None = None):
        super().__init__(self.message)
        self.cause = cause
