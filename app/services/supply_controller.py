# app/services/supply_controller.py
"""
문제 공급 컨트롤러

TryStore -> (Served | NeedGenerate) -> (GenerateOk -> Persist -> Served) | (GenerateFail -> Failed)

1) 저장소에서 안 보여준 문제를 claim (shown=true commit 후 반환)
2) 없으면 제외 조건 계산 -> LLM 생성
3) 생성된 문제는 바로 내려주므로 shown=true 로 저장 후 반환
4) 생성 실패는 QuestionUnavailable 로 감싸고 아무것도 저장하지 않는다
"""
import logging

from app.models.question import Question
from app.services.errors import GenerationError, QuestionUnavailable
from app.services.exclusion_resolver import ExclusionResolver
from app.services.question_generator import QuestionGenerator
from app.services.question_store import QuestionStore

logger = logging.getLogger(__name__)

# 잃어버린 claim 은 한 번만 다시 조회
CLAIM_ATTEMPTS = 2


class SupplyController:
    def __init__(
        self,
        store: QuestionStore,
        resolver: ExclusionResolver,
        generator: QuestionGenerator,
    ):
        self.store = store
        self.resolver = resolver
        self.generator = generator

    def next_question(self, user_id: str) -> Question:
        claimed = self.store.claim_unshown(max_attempts=CLAIM_ATTEMPTS)
        if claimed is not None:
            logger.info("[SUPPLY] served stored question id=%s user=%s", claimed.id, user_id)
            return claimed

        exclusions = self.resolver.compute(user_id)
        logger.info(
            "[SUPPLY] no unshown question, generating user=%s titles=%d categories=%d",
            user_id,
            len(exclusions.titles),
            len(exclusions.categories),
        )

        try:
            draft = self.generator.generate(exclusions.titles, exclusions.categories)
        except GenerationError as e:
            logger.warning("[SUPPLY] generation failed user=%s: %s", user_id, e)
            raise QuestionUnavailable(e) from e

        created = self.store.insert(draft, shown=True)
        logger.info("[SUPPLY] served generated question id=%s user=%s", created.id, user_id)
        return created
