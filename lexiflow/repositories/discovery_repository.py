"""디스커버리 요청 레포지토리.

Discovery Request Repository — ordered by due date, soonest first.
"""

from lexiflow.models.discovery import DiscoveryRequest
from lexiflow.repositories.base import BaseRepository


class DiscoveryRequestRepository(BaseRepository[DiscoveryRequest]):
    def __init__(self) -> None:
        super().__init__(DiscoveryRequest, default_order=DiscoveryRequest.due_date.asc().nulls_last())


discovery_repository: DiscoveryRequestRepository = DiscoveryRequestRepository()
