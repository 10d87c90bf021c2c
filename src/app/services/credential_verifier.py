from abc import ABC, abstractmethod

from libs.result import Result

# Error codes a verifier may return
WRONG_CREDENTIAL = "WRONG_CREDENTIAL"
VERIFIER_UNAVAILABLE = "VERIFIER_UNAVAILABLE"


class ICredentialVerifier(ABC):
    """Re-authenticates an account by email and password"""

    @abstractmethod
    async def verify(self, email: str, password: str) -> Result[None]:
        """
        Check the credential against the identity provider.

        Returns:
            Ok on success, or Error with code WRONG_CREDENTIAL when the
            provider rejected the password, VERIFIER_UNAVAILABLE otherwise
        """
        pass
