"""관할 레포지토리.

Jurisdiction Repository — global reference data, never tenant-scoped.
"""

from lexiflow.models.jurisdiction import Jurisdiction
from lexiflow.repositories.base import BaseRepository


class JurisdictionRepository(BaseRepository[Jurisdiction]):
    def __init__(self) -> None:
        super().__init__(Jurisdiction, default_order=Jurisdiction.name)


jurisdiction_repository: JurisdictionRepository = JurisdictionRepository()
