# app/routers/questions.py
from fastapi import APIRouter, Depends, status

from app.deps import (
    get_current_user_id,
    get_knowledge_ledger,
    get_question_store,
    get_supply_controller,
)
from app.schemas.question import (
    KnowCategoryRequest,
    KnowCategoryResponse,
    QuestionOut,
    SeedResponse,
)
from app.services.knowledge_ledger import KnowledgeLedger
from app.services.question_store import QuestionStore
from app.services.seed import seed_questions
from app.services.supply_controller import SupplyController

router = APIRouter(tags=["questions"])

# 문제 하나 받기 (저장된 것 중 안 본 것, 없으면 생성)
# StoreError -> 500 {"error"}, QuestionUnavailable -> 500 {"message"} (main.py 핸들러)
@router.get("/question", response_model=QuestionOut)
def get_question(
    user_id: str = Depends(get_current_user_id),
    controller: SupplyController = Depends(get_supply_controller),
):
    return controller.next_question(user_id)

# 카테고리를 안다고 표시. 걸러내기는 다음 생성 때 ExclusionResolver 가 한다.
@router.post(
    "/know-category",
    response_model=KnowCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def know_category(
    payload: KnowCategoryRequest,
    ledger: KnowledgeLedger = Depends(get_knowledge_ledger),
):
    fact = ledger.record_known(payload.user_id, payload.category)
    return {"id": fact.id}

# 기본 문제 세트 추가 (이미 있는 제목은 건너뜀)
@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
def seed(store: QuestionStore = Depends(get_question_store)):
    inserted = seed_questions(store)
    return {"inserted": inserted, "message": "Questions seeded"}
