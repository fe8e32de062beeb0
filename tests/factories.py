from app.schemas.question import QuestionDraft
from app.services.errors import MalformedResponse


def make_draft(title="Two Sum", category="array", **overrides) -> QuestionDraft:
    fields = {
        "question": title,
        "description": f"{title} description",
        "constraints": "n <= 10^4",
        "hint": "hash map",
        "solution": "Use a hash map.",
        "code_solution": "def solve(): pass",
        "category": category,
        "trivia": "fun fact",
    }
    fields.update(overrides)
    return QuestionDraft(**fields)


class StubGenerator:
    """generate 호출 인자를 기록하고 준비된 draft 또는 예외를 돌려준다."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls = []

    def generate(self, excluded_titles, excluded_categories):
        self.calls.append((set(excluded_titles), set(excluded_categories)))
        if not self.results:
            raise MalformedResponse("stub has nothing left to return")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
