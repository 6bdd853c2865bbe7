"""판사/상대방 변호인 프로필 레포지토리.

Judge and opposing-counsel profile repositories.
"""

from lexiflow.models.profile import JudgeProfile, OpposingCounselProfile
from lexiflow.repositories.base import BaseRepository


class JudgeProfileRepository(BaseRepository[JudgeProfile]):
    def __init__(self) -> None:
        super().__init__(JudgeProfile, default_order=JudgeProfile.name)


class OpposingCounselRepository(BaseRepository[OpposingCounselProfile]):
    def __init__(self) -> None:
        super().__init__(OpposingCounselProfile, default_order=OpposingCounselProfile.name)


judge_repository: JudgeProfileRepository = JudgeProfileRepository()
opposing_counsel_repository: OpposingCounselRepository = OpposingCounselRepository()
