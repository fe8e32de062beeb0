# app/services/question_store.py
"""
questions 테이블 접근 계층.

fetch_unshown_random + mark_shown 을 따로 부르면 동시 요청이 같은 행을 가져갈 수 있으므로
컨트롤러는 claim_unshown (조건부 UPDATE) 을 사용한다.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, false, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.question import Question
from app.schemas.question import QuestionDraft
from app.services.errors import NotFound, StoreError

logger = logging.getLogger(__name__)


class QuestionStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, exc: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error("[STORE] db error: %s", exc)
        return StoreError(str(exc))

    def fetch_unshown_random(self) -> Optional[Question]:
        stmt = (
            select(Question)
            .where(Question.shown == false())
            .order_by(func.random())
            .limit(1)
        )
        try:
            return self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    def mark_shown(self, question_id: int) -> None:
        try:
            row = self.db.get(Question, question_id)
            if row is None:
                raise NotFound(question_id)
            row.shown = True
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    def claim_unshown(self, max_attempts: int = 2) -> Optional[Question]:
        """
        shown=false 인 행 하나를 골라 shown=true 로 바꾸고 반환 (commit 까지 완료).

        UPDATE ... WHERE shown = false 가 0행이면 다른 요청이 먼저 가져갔거나 삭제된 것.
        max_attempts 만큼 다시 조회한 뒤에도 실패하면 None.
        """
        for attempt in range(1, max_attempts + 1):
            row = self.fetch_unshown_random()
            if row is None:
                return None
            row_id = row.id

            stmt = (
                update(Question)
                .where(Question.id == row_id, Question.shown == false())
                .values(shown=True)
                .execution_options(synchronize_session=False)
            )
            try:
                result = self.db.execute(stmt)
                self.db.commit()
            except SQLAlchemyError as e:
                raise self._fail(e) from e

            if result.rowcount == 1:
                return row

            logger.info("[STORE] lost claim on question id=%s (attempt %d)", row_id, attempt)
        return None

    def insert(self, draft: QuestionDraft, shown: bool = False) -> Question:
        row = Question(**draft.model_dump(), shown=shown)
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail(e) from e
        return row

    def all_titles(self) -> List[str]:
        try:
            return list(self.db.execute(select(Question.question)).scalars().all())
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    def count(self, shown: Optional[bool] = None) -> int:
        stmt = select(func.count(Question.id))
        if shown is not None:
            stmt = stmt.where(Question.shown == shown)
        try:
            return self.db.execute(stmt).scalar_one()
        except SQLAlchemyError as e:
            raise self._fail(e) from e

    # 관리용 전체 삭제
    def delete_all(self) -> int:
        try:
            result = self.db.execute(delete(Question))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail(e) from e
        return result.rowcount
