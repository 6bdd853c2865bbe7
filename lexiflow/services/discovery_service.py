"""디스커버리 요청 서비스.

Discovery Request Service — CRUD over discovery requests of a case.
"""

from lexiflow.models.discovery import DiscoveryRequest
from lexiflow.repositories.case_repository import case_repository
from lexiflow.repositories.discovery_repository import discovery_repository
from lexiflow.schemas.discovery import DiscoveryRequestResponse
from lexiflow.services.base import BaseCrudService


class DiscoveryRequestService(BaseCrudService[DiscoveryRequest, DiscoveryRequestResponse]):
    def __init__(self) -> None:
        super().__init__(
            discovery_repository,
            DiscoveryRequestResponse,
            resource_name="Discovery request",
            references={"case_id": (case_repository, "Case")},
        )


discovery_service: DiscoveryRequestService = DiscoveryRequestService()
