"""
Client Management Use Cases
"""

from .create_client_use_case import CreateClientUseCase
from .dtos import ClientForm, ClientInfo
from .get_client_use_case import GetClientUseCase
from .list_clients_use_case import ListClientsUseCase
from .update_client_use_case import UpdateClientUseCase

__all__ = [
    "CreateClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "UpdateClientUseCase",
    "ClientForm",
    "ClientInfo",
]
