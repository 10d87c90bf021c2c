"""
Access Role Provisioner

Writes the authorization entry of a freshly invited portal user.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccessRoleEntry, ClientUserRole

logger = logging.getLogger(__name__)

PROVISIONING_ERROR = "PROVISIONING_ERROR"


class AccessRoleProvisioner:
    """
    Upserts the AccessRoleEntry keyed on the portal user id.

    Business Rules:
    - Repeated calls leave exactly one entry per user id (last write wins)
    - Only store-level failures are reported; no business validation here
    - Runs inside a unit of work already entered by the caller
    """

    def __init__(self, uow: UnitOfWork, role: ClientUserRole = ClientUserRole.admin):
        self.uow = uow
        self.role = role

    async def provision(
        self, user_id: str, email: str, client_id: UUID
    ) -> Result[AccessRoleEntry]:
        entry = AccessRoleEntry(
            user_id=user_id,
            email=email,
            role=self.role,
            client_id=client_id,
        )
        try:
            entry = await self.uow.access_roles.upsert(entry)
            await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Error provisioning access role for {user_id}: {exc!r}")
            await self.uow.rollback()
            return Return.err(
                Error(PROVISIONING_ERROR, "Access role could not be provisioned")
            )

        return Return.ok(entry)
