"""v1 API 라우터 패키지 — 모든 리소스 엔드포인트 통합.

v1 API Router package — aggregates every resource router into a single
router mounted at /api/v1.
"""

from fastapi import APIRouter

from lexiflow.api.v1.ai import router as ai_router
from lexiflow.api.v1.analytics import router as analytics_router
from lexiflow.api.v1.audit_logs import router as audit_logs_router
from lexiflow.api.v1.auth import router as auth_router
from lexiflow.api.v1.cases import router as cases_router
from lexiflow.api.v1.clauses import router as clauses_router
from lexiflow.api.v1.clients import router as clients_router
from lexiflow.api.v1.discovery import router as discovery_router
from lexiflow.api.v1.documents import router as documents_router
from lexiflow.api.v1.judges import router as judges_router
from lexiflow.api.v1.jurisdictions import router as jurisdictions_router
from lexiflow.api.v1.opposing_counsel import router as opposing_counsel_router
from lexiflow.api.v1.search import router as search_router
from lexiflow.api.v1.tasks import router as tasks_router
from lexiflow.api.v1.time_entries import router as time_entries_router
from lexiflow.api.v1.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(clients_router, prefix="/clients", tags=["Clients"])
api_router.include_router(cases_router, prefix="/cases", tags=["Cases"])
api_router.include_router(documents_router, prefix="/documents", tags=["Documents"])
api_router.include_router(discovery_router, prefix="/discovery-requests", tags=["Discovery"])
api_router.include_router(clauses_router, prefix="/clauses", tags=["Clauses"])
api_router.include_router(jurisdictions_router, prefix="/jurisdictions", tags=["Jurisdictions"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["Tasks"])
api_router.include_router(time_entries_router, prefix="/time-entries", tags=["Billing"])
api_router.include_router(judges_router, prefix="/judges", tags=["Judge Profiles"])
api_router.include_router(opposing_counsel_router, prefix="/opposing-counsel", tags=["Opposing Counsel"])
api_router.include_router(audit_logs_router, prefix="/audit-logs", tags=["Audit Logs"])
api_router.include_router(search_router, prefix="/search", tags=["Search"])
api_router.include_router(ai_router, prefix="/ai", tags=["AI"])
api_router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])
