# app/deps.py
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.db.base import SessionLocal
from app.services.exclusion_resolver import ExclusionResolver
from app.services.knowledge_ledger import KnowledgeLedger
from app.services.question_generator import QuestionGenerator
from app.services.question_store import QuestionStore
from app.services.supply_controller import SupplyController

# ----------------------------
# DB 세션
# ----------------------------
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

# ----------------------------
# 현재 사용자
# 인증이 없으므로 ?user_id= 가 없으면 설정의 기본 사용자
# ----------------------------
def get_current_user_id(
    user_id: Optional[str] = Query(None, min_length=1, max_length=64),
) -> str:
    return user_id or settings.default_user_id

# ----------------------------
# 문제 생성기 (프로세스당 하나, 키는 시작 시 한 번 읽음)
# ----------------------------
@lru_cache
def get_question_generator() -> QuestionGenerator:
    return QuestionGenerator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_sec,
        temperature=settings.openai_temperature,
    )

def get_question_store(db: Session = Depends(get_db)) -> QuestionStore:
    return QuestionStore(db)

def get_knowledge_ledger(db: Session = Depends(get_db)) -> KnowledgeLedger:
    return KnowledgeLedger(db)

def get_supply_controller(
    store: QuestionStore = Depends(get_question_store),
    ledger: KnowledgeLedger = Depends(get_knowledge_ledger),
    generator: QuestionGenerator = Depends(get_question_generator),
) -> SupplyController:
    return SupplyController(store, ExclusionResolver(store, ledger), generator)
