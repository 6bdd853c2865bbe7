"""의뢰인 서비스.

Client Service — plain CRUD over clients.
"""

from lexiflow.models.client import Client
from lexiflow.repositories.client_repository import client_repository
from lexiflow.schemas.client import ClientResponse
from lexiflow.services.base import BaseCrudService


class ClientService(BaseCrudService[Client, ClientResponse]):
    def __init__(self) -> None:
        super().__init__(client_repository, ClientResponse, resource_name="Client")


client_service: ClientService = ClientService()
