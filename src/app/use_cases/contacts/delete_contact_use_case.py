"""
Delete Contact Use Case
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import CONTACT_NOT_FOUND, PERSISTENCE_ERROR

from .dtos import DeleteContactResponse

logger = logging.getLogger(__name__)


class DeleteContactUseCase:
    """
    Use case for deleting a contact.

    Business Rules:
    - The contact must belong to the given client
    - The access role of a linked portal user is left in place
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, client_id: UUID, contact_id: UUID
    ) -> Result[DeleteContactResponse]:
        async with self.uow:
            contact = await self.uow.contacts.get_by_id(contact_id)
            if contact is None or contact.client_id != client_id:
                return Return.err(Error(CONTACT_NOT_FOUND, "Contact not found"))

            try:
                await self.uow.contacts.delete(contact_id)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"Error deleting contact {contact_id}: {exc!r}")
                await self.uow.rollback()
                return Return.err(Error(PERSISTENCE_ERROR, "Contact could not be deleted"))

            return Return.ok(DeleteContactResponse(status="deleted"))
