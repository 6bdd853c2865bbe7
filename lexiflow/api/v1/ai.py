"""AI 라우터 — 텍스트 정제.

AI Router — best-effort text refinement.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from lexiflow.api.deps import get_current_user
from lexiflow.models.user import UserProfile
from lexiflow.schemas.ai import RefineRequest, RefineResponse
from lexiflow.services.ai_service import ai_service

router: APIRouter = APIRouter()


@router.post("/refine", response_model=RefineResponse)
async def refine_text(
    data: RefineRequest,
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> RefineResponse:
    """텍스트를 AI로 정제합니다 — 실패 시 원문 반환.

    Refine text with AI. Falls back to the original text, never errors.
    """
    return await ai_service.refine(data.text, data.kind)
