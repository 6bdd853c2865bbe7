"""의뢰인 레포지토리.

Client Repository — generic CRUD over the clients table.
"""

from lexiflow.models.client import Client
from lexiflow.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    def __init__(self) -> None:
        super().__init__(Client, default_order=Client.name)


client_repository: ClientRepository = ClientRepository()
