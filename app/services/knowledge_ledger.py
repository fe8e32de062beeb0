# app/services/knowledge_ledger.py
# user_knowledge 테이블: 추가만 하고 수정/삭제 경로는 없다.
from typing import Set

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user_knowledge import UserKnowledge
from app.services.errors import StoreError


class KnowledgeLedger:
    def __init__(self, db: Session):
        self.db = db

    def record_known(self, user_id: str, category: str) -> UserKnowledge:
        # 같은 (user_id, category) 중복 허용. 읽을 때 set 으로 합쳐진다.
        fact = UserKnowledge(user_id=user_id, category=category)
        try:
            self.db.add(fact)
            self.db.commit()
            self.db.refresh(fact)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
        return fact

    def known_categories(self, user_id: str) -> Set[str]:
        stmt = (
            select(UserKnowledge.category)
            .where(UserKnowledge.user_id == user_id)
            .distinct()
        )
        try:
            return set(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
