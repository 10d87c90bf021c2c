from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from src.app.use_cases.clients import (
    ClientForm,
    CreateClientUseCase,
    ListClientsUseCase,
    UpdateClientUseCase,
)
from src.domain.entities import Client


@pytest.mark.asyncio
async def test_create_client(mock_uow):
    use_case = CreateClientUseCase(mock_uow)

    result = await use_case.execute(ClientForm(trade_name="  Acme Bakery ", segment="Food"))

    assert result.is_ok()
    assert result.value.trade_name == "Acme Bakery"
    assert result.value.segment == "Food"
    assert result.value.active is True
    assert result.value.masked_id != result.value.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_client_requires_trade_name(mock_uow):
    use_case = CreateClientUseCase(mock_uow)

    result = await use_case.execute(ClientForm(legal_name="Acme Ltda"))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.clients.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_clients_passes_filters(mock_uow):
    mock_uow.clients.list.return_value = [Client(id=uuid4(), trade_name="Acme")]
    use_case = ListClientsUseCase(mock_uow)

    result = await use_case.execute(active=True, search="ac")

    assert result.is_ok()
    assert [c.trade_name for c in result.value] == ["Acme"]
    mock_uow.clients.list.assert_called_once_with(active=True, search="ac")


@pytest.mark.asyncio
async def test_update_client_is_partial(mock_uow):
    client_id = uuid4()
    mock_uow.clients.update.return_value = Client(
        id=client_id, trade_name="Acme", active=False
    )
    use_case = UpdateClientUseCase(mock_uow)

    result = await use_case.execute(client_id, ClientForm(active=False))

    assert result.is_ok()
    mock_uow.clients.update.assert_called_once_with(client_id, {"active": False})


@pytest.mark.asyncio
async def test_update_client_cannot_clear_trade_name(mock_uow):
    use_case = UpdateClientUseCase(mock_uow)

    result = await use_case.execute(uuid4(), ClientForm(trade_name=" "))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.clients.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_unknown_client(mock_uow):
    mock_uow.clients.update.return_value = None
    use_case = UpdateClientUseCase(mock_uow)

    result = await use_case.execute(uuid4(), ClientForm(segment="Retail"))

    assert result.is_err()
    assert result.error.code == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_client_store_failure_is_persistence_error(mock_uow):
    mock_uow.commit.side_effect = SQLAlchemyError("disk full")
    use_case = CreateClientUseCase(mock_uow)

    result = await use_case.execute(ClientForm(trade_name="Acme Bakery"))

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"
    mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_update_client_store_failure_is_persistence_error(mock_uow):
    mock_uow.clients.update.side_effect = SQLAlchemyError("database is locked")
    use_case = UpdateClientUseCase(mock_uow)

    result = await use_case.execute(uuid4(), ClientForm(segment="Retail"))

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()
