from abc import ABC, abstractmethod

from libs.result import Result

INVITATION_ERROR = "INVITATION_ERROR"


class IInvitationIssuer(ABC):
    """Creates a portal identity for an email and sends the signup email"""

    @abstractmethod
    async def invite(self, email: str, redirect_url: str) -> Result[str]:
        """
        Invite an email address to the portal.

        Returns:
            Result with the new portal user id, or Error INVITATION_ERROR
        """
        pass
