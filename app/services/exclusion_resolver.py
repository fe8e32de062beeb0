# app/services/exclusion_resolver.py
from typing import FrozenSet, NamedTuple

from app.services.knowledge_ledger import KnowledgeLedger
from app.services.question_store import QuestionStore


class Exclusions(NamedTuple):
    titles: FrozenSet[str]
    categories: FrozenSet[str]


class ExclusionResolver:
    """생성 시 피해야 할 제목(전체 저장분)과 카테고리(사용자가 안다고 표시한 것)"""

    def __init__(self, store: QuestionStore, ledger: KnowledgeLedger):
        self.store = store
        self.ledger = ledger

    def compute(self, user_id: str) -> Exclusions:
        return Exclusions(
            titles=frozenset(self.store.all_titles()),
            categories=frozenset(self.ledger.known_categories(user_id)),
        )
