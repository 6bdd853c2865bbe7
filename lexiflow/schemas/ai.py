"""AI 텍스트 정제 Pydantic 스키마 정의.

AI text refinement request/response schemas.
"""

from typing import Literal

from pydantic import BaseModel, Field

RefineKind = Literal["time_entry", "clause", "general"]


class RefineRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=20000)
    kind: RefineKind = "general"


class RefineResponse(BaseModel):
    """정제 결과 — refined_by_ai가 False면 refined는 원문과 동일.

    When refined_by_ai is False, `refined` equals `original`.
    """

    original: str
    refined: str
    model: str | None
    refined_by_ai: bool
