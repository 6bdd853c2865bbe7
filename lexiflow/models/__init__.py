"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — central import point for all domain models.
Importing from this package registers every model with the metadata, which
Alembic and relationship resolution depend on.

Modules:
    organization: 조직 (Organization / tenant)
    user: 사용자 프로필 (User profiles and role levels)
    client: 의뢰인 (Clients)
    case: 사건 (Cases)
    document: 문서 및 버전 (Documents and document versions)
    discovery: 디스커버리 요청 (Discovery requests)
    clause: 조항 및 버전 (Clauses and clause versions)
    jurisdiction: 관할 (Jurisdictions, global reference data)
    task: 업무 (Tasks)
    billing: 타임 엔트리 (Time entries)
    profile: 판사/상대방 변호인 (Judge and opposing-counsel profiles)
    audit: 감사 로그 (Audit log entries)
    search: 검색 기록 (Search query history)
    analytics: 분석 이벤트 (Analytics events)
"""

from lexiflow.models.organization import Organization
from lexiflow.models.user import UserProfile
from lexiflow.models.client import Client
from lexiflow.models.case import Case
from lexiflow.models.document import Document, DocumentVersion
from lexiflow.models.discovery import DiscoveryRequest
from lexiflow.models.clause import Clause, ClauseVersion
from lexiflow.models.jurisdiction import Jurisdiction
from lexiflow.models.task import Task
from lexiflow.models.billing import TimeEntry
from lexiflow.models.profile import JudgeProfile, OpposingCounselProfile
from lexiflow.models.audit import AuditLogEntry
from lexiflow.models.search import SearchQuery
from lexiflow.models.analytics import AnalyticsEvent

__all__ = [
    "Organization", "UserProfile",
    "Client", "Case", "Document", "DocumentVersion", "DiscoveryRequest",
    "Clause", "ClauseVersion", "Jurisdiction",
    "Task", "TimeEntry",
    "JudgeProfile", "OpposingCounselProfile",
    "AuditLogEntry", "SearchQuery", "AnalyticsEvent",
]
