from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.api.utils.identifiers import parse_identifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients import (
    ClientForm,
    ClientInfo,
    CreateClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    UpdateClientUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientInfo)
async def create_client(
    request: ClientForm,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Client

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (missing trade_name)
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = CreateClientUseCase(uow)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ClientInfo])
async def list_clients(
    active: Optional[bool] = Query(None, description="Filter by active flag"),
    search: Optional[str] = Query(None, description="Search trade or legal name"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List clients, optionally filtered"""
    use_case = ListClientsUseCase(uow)
    result = await use_case.execute(active=active, search=search)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/{client_id}", status_code=status.HTTP_200_OK, response_model=ClientInfo)
async def get_client(
    client_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Client

    client_id may be the raw id or its masked form.

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER
        - 404 Not Found: CLIENT_NOT_FOUND
    """
    client_uuid = parse_identifier(client_id, "client")

    use_case = GetClientUseCase(uow)
    result = await use_case.execute(client_uuid)

    if result.is_err():
        error = result.error
        if error.code == "CLIENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.patch("/{client_id}", status_code=status.HTTP_200_OK, response_model=ClientInfo)
async def update_client(
    client_id: str,
    request: ClientForm,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Client - partial update of the supplied fields

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER, VALIDATION_ERROR
        - 404 Not Found: CLIENT_NOT_FOUND
    """
    client_uuid = parse_identifier(client_id, "client")

    use_case = UpdateClientUseCase(uow)
    result = await use_case.execute(client_uuid, request)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "CLIENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
