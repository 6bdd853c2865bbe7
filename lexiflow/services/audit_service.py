"""감사 로그 서비스.

Audit Log Service — append-only audit entries. The actor and IP address
are taken from the request, never from the body.
"""

from lexiflow.models.audit import AuditLogEntry
from lexiflow.repositories.audit_repository import audit_repository
from lexiflow.schemas.audit import AuditLogResponse
from lexiflow.services.base import BaseCrudService


class AuditLogService(BaseCrudService[AuditLogEntry, AuditLogResponse]):
    def __init__(self) -> None:
        super().__init__(audit_repository, AuditLogResponse, resource_name="Audit log entry")


audit_service: AuditLogService = AuditLogService()
