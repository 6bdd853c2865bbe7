"""판사/상대방 변호인 프로필 서비스.

Judge and opposing counsel profile services.
"""

from lexiflow.models.profile import JudgeProfile, OpposingCounselProfile
from lexiflow.repositories.profile_repository import judge_repository, opposing_counsel_repository
from lexiflow.schemas.profile import JudgeProfileResponse, OpposingCounselProfileResponse
from lexiflow.services.base import BaseCrudService


class JudgeProfileService(BaseCrudService[JudgeProfile, JudgeProfileResponse]):
    def __init__(self) -> None:
        super().__init__(judge_repository, JudgeProfileResponse, resource_name="Judge profile")


class OpposingCounselService(BaseCrudService[OpposingCounselProfile, OpposingCounselProfileResponse]):
    def __init__(self) -> None:
        super().__init__(
            opposing_counsel_repository,
            OpposingCounselProfileResponse,
            resource_name="Opposing counsel profile",
        )


judge_service: JudgeProfileService = JudgeProfileService()
opposing_counsel_service: OpposingCounselService = OpposingCounselService()
