from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional

# -- 생성/저장용 --

# LLM 출력 검증 + Store.insert 입력
class QuestionDraft(BaseModel):
    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    question: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("question", "title"),
        description="문제 제목",
    )
    description: str
    constraints: str
    hint: str
    solution: str
    code_solution: str
    category: str = Field(..., min_length=1)
    trivia: str


# -- Request --

class KnowCategoryRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=64)
    category: str = Field(..., min_length=1, max_length=100)


# -- Response --

class QuestionOut(BaseModel):
    id: int
    question: str
    description: str
    constraints: str
    hint: str
    solution: str
    code_solution: str
    category: str
    trivia: str
    model_config = ConfigDict(from_attributes=True)


class KnowCategoryResponse(BaseModel):
    id: int


class SeedResponse(BaseModel):
    inserted: int
    message: Optional[str] = None
