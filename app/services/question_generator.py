"""
코딩 면접 문제 생성 Service (OpenAI API)

- 이미 저장된 제목, 사용자가 안다고 표시한 카테고리를 프롬프트에 나열해 피하도록 요청한다.
  (모델이 지키는지는 보장하지 않음)
- 응답은 신뢰하지 않는 텍스트로 보고 QuestionDraft 스키마로 검증한다.
- 재시도는 하지 않는다. 클라이언트가 /question 을 다시 부르면 된다.
"""
import json
import logging
import re
from typing import Any, Iterable, Optional

import openai
from openai import OpenAI
from pydantic import ValidationError

from app.schemas.question import QuestionDraft
from app.services.errors import MalformedResponse, UpstreamUnavailable

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "title",
    "description",
    "constraints",
    "hint",
    "solution",
    "code_solution",
    "category",
    "trivia",
)

SYSTEM_PROMPT = """
You are an experienced software engineering interviewer who writes LeetCode-style
coding practice problems. You always answer with exactly one JSON object and no
other text.
"""

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```", re.IGNORECASE)
_OUTER_OBJECT = re.compile(r"\{[\s\S]*\}")


class QuestionGenerator:
    """OpenAI chat completion 으로 새 문제 하나 생성"""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        temperature: float = 0.7,
        client: Optional[Any] = None,
    ):
        self.model = model
        self.temperature = temperature
        # 키가 없어도 서버는 떠야 하므로 client 는 None 으로 두고 generate 에서 실패 처리
        if client is not None:
            self.client = client
        elif api_key:
            self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        else:
            logger.warning("[GEN] OPENAI_API_KEY is not set. Question generation will fail.")
            self.client = None

    @staticmethod
    def _bullet_block(items: Iterable[str]) -> str:
        items = sorted(i for i in items if i)
        if not items:
            return "(none)"
        return "\n".join(f"- {i}" for i in items)

    @staticmethod
    def build_prompt(excluded_titles: Iterable[str], excluded_categories: Iterable[str]) -> str:
        """
        프롬프트 템플릿 빌더

        Args:
            excluded_titles: 이미 존재하는 문제 제목
            excluded_categories: 사용자가 이미 안다고 표시한 카테고리

        Returns:
            user 메시지 문자열
        """
        title_block = QuestionGenerator._bullet_block(excluded_titles)
        category_block = QuestionGenerator._bullet_block(excluded_categories)
        keys = ", ".join(f'"{k}"' for k in REQUIRED_FIELDS)

        return f"""
<goal>
Write ONE new coding interview practice problem.
</goal>

<excluded_titles>
Do not reuse or closely paraphrase any of these problem titles:
{title_block}
</excluded_titles>

<excluded_categories>
Do not pick a problem from any of these categories:
{category_block}
</excluded_categories>

<rules>
1. Return a single JSON object with exactly these string keys: {keys}.
2. "title" is the problem name, "category" is a short lowercase topic label (e.g. "array", "graph").
3. "constraints" lists input limits, "hint" is one sentence, "solution" explains the approach in prose.
4. "code_solution" is a complete reference implementation as a string.
5. "trivia" is one interesting fact related to the problem or its technique.
6. Output JSON only. No markdown, no commentary.
</rules>

<output_format>
{{
  "title": "Two Sum",
  "description": "Given an array of integers, return indices of the two numbers such that they add up to a target.",
  "constraints": "2 <= nums.length <= 10^4",
  "hint": "Try using a hash map to store the indices.",
  "solution": "Store each value's index in a hash map and look up the complement.",
  "code_solution": "def two_sum(nums, target): ...",
  "category": "array",
  "trivia": "Two Sum is the first problem on LeetCode."
}}
</output_format>
"""

    @staticmethod
    def parse_payload(content: Optional[str]) -> QuestionDraft:
        """
        모델 텍스트에서 JSON 객체를 꺼내 QuestionDraft 로 검증.
        순서: 그대로 json.loads -> ```json 블록 -> 가장 바깥 {...}
        """
        if not content or not content.strip():
            raise MalformedResponse("empty response from generation service")

        data: Any = None
        candidates = [content.strip()]
        fenced = _FENCED_JSON.search(content)
        if fenced:
            candidates.append(fenced.group(1))
        outer = _OUTER_OBJECT.search(content)
        if outer:
            candidates.append(outer.group(0))

        for text in candidates:
            try:
                data = json.loads(text)
                break
            except json.JSONDecodeError:
                continue
        else:
            raise MalformedResponse("no JSON object found in generation response")

        if not isinstance(data, dict):
            raise MalformedResponse(f"expected JSON object, got {type(data).__name__}")

        missing = [k for k in REQUIRED_FIELDS if k not in data and not (k == "title" and "question" in data)]
        if missing:
            raise MalformedResponse(f"generation response missing fields: {', '.join(missing)}")

        try:
            return QuestionDraft.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(f"invalid generation response: {e.error_count()} field error(s)") from e

    def _complete(self, prompt: str) -> Optional[str]:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                response_format={"type": "json_object"},
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT.strip()},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APITimeoutError as e:
            raise UpstreamUnavailable("generation service timed out") from e
        except openai.APIStatusError as e:
            raise UpstreamUnavailable(f"generation service returned status {e.status_code}") from e
        except openai.APIConnectionError as e:
            raise UpstreamUnavailable("could not reach generation service") from e
        except openai.OpenAIError as e:
            raise UpstreamUnavailable(f"generation service error: {type(e).__name__}") from e

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise MalformedResponse("generation response contained no choices")
        return choices[0].message.content

    def generate(self, excluded_titles: Iterable[str], excluded_categories: Iterable[str]) -> QuestionDraft:
        if self.client is None:
            raise UpstreamUnavailable("generation service credential is not configured")

        excluded_titles = list(excluded_titles)
        excluded_categories = list(excluded_categories)
        logger.info(
            "[GEN] requesting question model=%s excluded_titles=%d excluded_categories=%d",
            self.model,
            len(excluded_titles),
            len(excluded_categories),
        )

        content = self._complete(self.build_prompt(excluded_titles, excluded_categories))
        try:
            draft = self.parse_payload(content)
        except MalformedResponse as e:
            logger.warning("[GEN] malformed response: %s", e)
            logger.debug("[GEN] raw response: %r", content)
            raise

        logger.info("[GEN] generated title=%r category=%r", draft.question, draft.category)
        return draft
