"""감사 로그 레포지토리.

Audit Log Repository — newest entries first.
"""

from lexiflow.models.audit import AuditLogEntry
from lexiflow.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLogEntry]):
    def __init__(self) -> None:
        super().__init__(AuditLogEntry)


audit_repository: AuditLogRepository = AuditLogRepository()
